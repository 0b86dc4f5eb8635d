"""Fixed CORS headers on every response, and a blanket OPTIONS preflight."""

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from ..dispatcher import CORS_HEADERS


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """Answer OPTIONS with 200 and stamp CORS headers onto every response."""

    async def dispatch(self, request: Request, call_next) -> Response:
        if request.method == 'OPTIONS':
            response = Response(status_code=200)
        else:
            response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response
