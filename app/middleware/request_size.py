from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

DEFAULT_MAX_BYTES = 64 * 1024


class RequestSizeMiddleware(BaseHTTPMiddleware):
    """Reject request bodies larger than max_bytes with a 413 in the refund result shape."""

    def __init__(self, app, max_bytes: int = DEFAULT_MAX_BYTES):
        super().__init__(app)
        self.max_bytes = max_bytes

    async def dispatch(self, request: Request, call_next):
        content_length = request.headers.get("content-length", "")
        if content_length.isdigit() and int(content_length) > self.max_bytes:
            return JSONResponse(
                status_code=413,
                content={
                    "success": False,
                    "message": f"Request body exceeds the {self.max_bytes} byte limit",
                },
            )
        return await call_next(request)
