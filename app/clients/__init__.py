from .lemonsqueezy import BillingClient, LemonSqueezyClient, UpstreamResponse, upstream_error_detail

__all__ = ["BillingClient", "LemonSqueezyClient", "UpstreamResponse", "upstream_error_detail"]
