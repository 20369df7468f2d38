from __future__ import annotations

from starlette.types import ASGIApp, Message, Receive, Scope, Send

SECURITY_HEADERS: dict[str, str] = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "X-XSS-Protection": "1; mode=block",
}


class SecurityHeadersMiddleware:
    """Force a fixed set of headers onto every HTTP response.

    Values set by a handler under the same names are replaced, not kept.
    """

    def __init__(self, app: ASGIApp, headers: dict[str, str] | None = None):
        self.app = app
        self.headers = SECURITY_HEADERS if headers is None else headers
        self._raw = [
            (key.lower().encode("latin-1"), value.encode("latin-1"))
            for key, value in self.headers.items()
        ]
        self._names = {key for key, _ in self._raw}

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        async def send_wrapper(message: Message) -> None:
            if message["type"] == "http.response.start":
                filtered = [
                    (k, v)
                    for (k, v) in message.get("headers", [])
                    if k.lower() not in self._names
                ]
                filtered.extend(self._raw)
                message["headers"] = filtered
            await send(message)

        await self.app(scope, receive, send_wrapper)
