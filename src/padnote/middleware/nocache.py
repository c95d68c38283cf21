"""No-cache middleware, pads must always be fetched fresh."""

NO_CACHE_HEADERS = [
    (b"cache-control", b"no-cache, no-store, no-transform, must-revalidate, private, max-age=0"),
    (b"pragma", b"no-cache"),
    (b"expires", b"Thu, 01 Jan 1970 00:00:00 GMT"),
    (b"x-accel-expires", b"0"),
]

# Request headers that could make an upstream answer 304
ETAG_HEADERS = {b"etag", b"if-modified-since", b"if-match", b"if-none-match", b"if-range", b"if-unmodified-since"}


class NoCacheMiddleware:
    """ASGI middleware stripping validators and adding no-cache headers."""

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        scope = dict(scope)
        scope["headers"] = [h for h in scope.get("headers", []) if h[0] not in ETAG_HEADERS]

        async def send_wrapper(message):
            if message["type"] == "http.response.start":
                names = {name for name, _ in NO_CACHE_HEADERS}
                headers = [h for h in message.get("headers", []) if h[0].lower() not in names]
                message = {**message, "headers": headers + NO_CACHE_HEADERS}
            await send(message)

        await self.app(scope, receive, send_wrapper)
