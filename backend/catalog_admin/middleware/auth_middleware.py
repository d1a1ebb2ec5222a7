import logging
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from jose import JWTError
from catalog_admin.core.security import decode_access_token

logger = logging.getLogger(__name__)


class AuthMiddleware(BaseHTTPMiddleware):
    """
    Identifies the user of every request and stores it on request.state

    Flow:
    1. JSON API paths (/api/...) read the bearer token from Authorization
    2. Any other path reads user_id from the signed session cookie
    3. request.state.user_id is set (None for anonymous requests)

    The middleware never rejects a request. Routes that need a user say so
    with the get_current_user / get_web_user dependencies, public routes
    simply do not ask for one.

    SessionMiddleware must run before this one (be added after it).
    """

    async def dispatch(self, request: Request, call_next):
        request.state.user_id = None

        if request.method != "OPTIONS":
            if request.url.path.startswith("/api/"):
                request.state.user_id = self._user_from_token(request)
            elif "session" in request.scope:
                request.state.user_id = request.session.get("user_id")

        return await call_next(request)

    @staticmethod
    def _user_from_token(request: Request):
        auth_header = request.headers.get("Authorization", "")
        if not auth_header.startswith("Bearer "):
            return None

        token = auth_header.replace("Bearer ", "", 1)
        try:
            payload = decode_access_token(token)
        except JWTError as e:
            logger.info("Rejected bearer token on %s: %s", request.url.path, e)
            return None

        return payload["user_id"]


def is_api_path(path: str) -> bool:
    """JSON API paths answer errors with JSON, the others with redirects"""
    return path == "/api" or path.startswith("/api/")
