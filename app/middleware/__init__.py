from .security_headers import SecurityHeadersMiddleware
from .request_size import RequestSizeMiddleware
from .request_id import RequestIDMiddleware
from .logging import StructuredLoggingMiddleware

__all__ = [
    "SecurityHeadersMiddleware",
    "RequestSizeMiddleware",
    "RequestIDMiddleware",
    "StructuredLoggingMiddleware",
]
