"""
Lemon Squeezy REST client.

Only the two calls the refund flow needs: order lookup and refund creation.
Both return the raw status code and decoded JSON:API body; interpreting them
is the orchestrator's job. No retries.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Protocol
from urllib.parse import quote

import httpx

JSON_API = "application/vnd.api+json"


@dataclass(frozen=True)
class UpstreamResponse:
    status_code: int
    body: Optional[Any] = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class BillingClient(Protocol):
    """Outbound capability used by the refund orchestrator."""

    async def get_order(self, order_id: str, api_key: str) -> UpstreamResponse: ...

    async def create_refund(self, payload: dict[str, Any], api_key: str) -> UpstreamResponse: ...


def upstream_error_detail(body: Any) -> Optional[str]:
    """Return errors[0].detail from a JSON:API error document, if present."""
    if not isinstance(body, dict):
        return None
    errors = body.get("errors")
    if not isinstance(errors, list) or not errors or not isinstance(errors[0], dict):
        return None
    detail = errors[0].get("detail")
    return str(detail) if detail else None


class LemonSqueezyClient:
    """Async client for the Lemon Squeezy API with bearer token auth."""

    def __init__(
        self,
        base_url: str,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: float = 30.0,
    ) -> None:
        self._base = base_url.rstrip("/")
        self._http = http_client
        self._timeout = timeout

    async def get_order(self, order_id: str, api_key: str) -> UpstreamResponse:
        # One path segment, whatever the id contains.
        return await self._request("GET", f"/orders/{quote(order_id, safe='')}", api_key)

    async def create_refund(self, payload: dict[str, Any], api_key: str) -> UpstreamResponse:
        return await self._request("POST", "/refunds", api_key, json=payload)

    async def _request(
        self,
        method: str,
        path: str,
        api_key: str,
        json: Optional[dict[str, Any]] = None,
    ) -> UpstreamResponse:
        url = f"{self._base}{path}"
        headers = {
            "Authorization": f"Bearer {api_key}",
            "Accept": JSON_API,
            "Content-Type": JSON_API,
        }
        if self._http is not None:
            resp = await self._http.request(method, url, headers=headers, json=json)
        else:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                resp = await client.request(method, url, headers=headers, json=json)
        return UpstreamResponse(status_code=resp.status_code, body=_decode(resp))


def _decode(resp: httpx.Response) -> Optional[Any]:
    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError:
        return None
