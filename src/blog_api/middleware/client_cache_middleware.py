from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

POST_LIST_PATH = "/api/v1/posts"
POST_LIST_CACHE_CONTROL = "public, s-maxage=300, stale-while-revalidate=600"


class ClientCacheMiddleware(BaseHTTPMiddleware):
    """Middleware to set the `Cache-Control` header for client-side caching on all responses.

    Parameters
    ----------
    app: FastAPI
        The FastAPI application instance.
    max_age: int, optional
        Duration (in seconds) for which the response should be cached. Defaults to 60 seconds.

    Note
    ----
        - Writes, error responses and per-user data (single posts, comments,
        profiles) are never cached. The post list is cached by shared caches
        for five minutes.
    """

    def __init__(self, app: FastAPI, max_age: int = 60) -> None:
        super().__init__(app)
        self.max_age = max_age

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response: Response = await call_next(request)
        path = request.url.path.rstrip("/")
        request_cache = (request.headers.get("cache-control") or "").lower()
        no_store_prefixes = (
            "/api/v1/posts/",
            "/api/v1/users",
            "/api/v1/auth",
            "/api/v1/newsletter",
            "/api/v1/ready",
        )

        if request.method != "GET" or response.status_code >= 400:
            response.headers["Cache-Control"] = "no-store"
            return response

        if "no-store" in request_cache or "no-cache" in request_cache:
            response.headers["Cache-Control"] = "no-store"
            return response

        if path == POST_LIST_PATH:
            response.headers["Cache-Control"] = POST_LIST_CACHE_CONTROL
            return response

        if any(path.startswith(prefix) for prefix in no_store_prefixes):
            response.headers["Cache-Control"] = "no-store"
            return response

        if "cache-control" not in {key.lower() for key in response.headers.keys()}:
            response.headers["Cache-Control"] = f"public, max-age={self.max_age}"

        return response
