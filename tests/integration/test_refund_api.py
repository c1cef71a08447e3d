"""Integration tests: full HTTP cycle through POST /api/lemonsqueezy/refund."""
import httpx

from app.clients.lemonsqueezy import LemonSqueezyClient, UpstreamResponse
from app.services.refund_service import RefundOrchestrator
from tests.fakes import FakeBillingClient, TEST_API_KEY, error_document, order_document, refund_document

URL = "/api/lemonsqueezy/refund"


def test_successful_full_refund(client, use_orchestrator, billing, orchestrator):
    use_orchestrator(orchestrator)
    resp = client.post(URL, json={"orderId": "ord_1", "reason": "duplicate"})
    assert resp.status_code == 200
    assert resp.json() == {
        "success": True,
        "message": "Refund processed successfully",
        "refund": {"id": "ref_9", "amount": 2999, "status": "refunded"},
    }
    assert "amount" not in billing.refund_calls[0][0]["data"]["attributes"]


def test_partial_refund_amount_in_cents(client, use_orchestrator, billing, orchestrator):
    use_orchestrator(orchestrator)
    resp = client.post(URL, json={"orderId": "ord_1", "amount": 19.99, "reason": "requested_by_customer"})
    assert resp.status_code == 200
    assert billing.refund_calls[0][0]["data"]["attributes"]["amount"] == 1999


def test_order_not_found(client, use_orchestrator):
    billing = FakeBillingClient(order=UpstreamResponse(404, error_document("Order not found")))
    use_orchestrator(RefundOrchestrator(TEST_API_KEY, billing))
    resp = client.post(URL, json={"orderId": "bad_id", "reason": "x"})
    assert resp.status_code == 404
    assert resp.json() == {"success": False, "message": "Order not found: Order not found"}
    assert billing.refund_calls == []


def test_unpaid_order_rejected(client, use_orchestrator):
    billing = FakeBillingClient(order=UpstreamResponse(200, order_document(status="pending")))
    use_orchestrator(RefundOrchestrator(TEST_API_KEY, billing))
    resp = client.post(URL, json={"orderId": "ord_1", "reason": "duplicate"})
    assert resp.status_code == 400
    assert resp.json()["message"] == "Order must be in 'paid' status to be refunded"


def test_refund_rejected_upstream(client, use_orchestrator):
    billing = FakeBillingClient(refund=UpstreamResponse(422, {"errors": [{"detail": "Already refunded"}]}))
    use_orchestrator(RefundOrchestrator(TEST_API_KEY, billing))
    resp = client.post(URL, json={"orderId": "ord_1", "reason": "duplicate"})
    assert resp.status_code == 422
    assert resp.json() == {"success": False, "message": "Refund failed: Already refunded"}


def test_missing_fields_return_400(client, use_orchestrator, billing, orchestrator):
    use_orchestrator(orchestrator)
    resp = client.post(URL, json={"orderId": "", "reason": ""})
    assert resp.status_code == 400
    assert resp.json() == {"success": False, "message": "Order ID and reason are required"}
    assert billing.call_count == 0


def test_missing_api_key_returns_500(client, monkeypatch):
    # Default dependency: credential comes from the environment at call time.
    monkeypatch.delenv("LEMONSQUEEZY_API_KEY", raising=False)
    resp = client.post(URL, json={"orderId": "ord_1", "reason": "duplicate"})
    assert resp.status_code == 500
    assert resp.json() == {"success": False, "message": "Lemon Squeezy API key not configured"}


def test_through_real_client_with_mock_transport(client, use_orchestrator):
    """The concrete client and orchestrator together, with the network mocked out."""
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if request.method == "GET":
            return httpx.Response(200, json=order_document("ord_1"))
        return httpx.Response(201, json=refund_document("ref_9", 1500, "refunded"))

    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    ls_client = LemonSqueezyClient("https://api.example.test/v1", http_client=http)
    use_orchestrator(RefundOrchestrator(TEST_API_KEY, ls_client))

    resp = client.post(URL, json={"orderId": "ord_1", "amount": 15, "reason": "duplicate"})
    assert resp.status_code == 200
    assert resp.json()["refund"] == {"id": "ref_9", "amount": 1500, "status": "refunded"}
    assert [r.method for r in seen] == ["GET", "POST"]
    assert seen[0].url.path == "/v1/orders/ord_1"
    assert seen[1].url.path == "/v1/refunds"


def test_upstream_network_failure_returns_500(client, use_orchestrator):
    billing = FakeBillingClient(refund_exc=httpx.ReadTimeout("timed out"))
    use_orchestrator(RefundOrchestrator(TEST_API_KEY, billing))
    resp = client.post(URL, json={"orderId": "ord_1", "reason": "duplicate"})
    assert resp.status_code == 500
    assert resp.json() == {"success": False, "message": "Internal server error"}


def test_dashboard_metrics(client):
    resp = client.get("/api/dashboard")
    assert resp.status_code == 200
    body = resp.json()
    titles = [m["title"] for m in body["metrics"]]
    assert titles == ["Total Revenue", "Orders", "Customers", "Refunds"]
    assert body["metrics"][0]["value"] == "$45,231.89"
    assert len(body["recent_activity"]) == 3


def test_refund_reasons(client):
    resp = client.get("/api/lemonsqueezy/refund/reasons")
    assert resp.status_code == 200
    assert [r["value"] for r in resp.json()] == ["duplicate", "fraudulent", "requested_by_customer", "other"]
