"""Request ID middleware (raw ASGI).

Forwards a well-formed client X-Request-ID or mints a UUID, publishes it to
request.state and the logging context, and echoes it on the response.
"""

import re
import uuid
from collections.abc import Awaitable, Callable, MutableMapping
from typing import Any

from event_registry.shared.telemetry.logging import request_id_var

Scope = MutableMapping[str, Any]
Message = MutableMapping[str, Any]
Receive = Callable[[], Awaitable[Message]]
Send = Callable[[Message], Awaitable[None]]
ASGIApp = Callable[[Scope, Receive, Send], Awaitable[None]]

_REQUEST_ID_RE = re.compile(r"^[a-zA-Z0-9_-]{1,64}$")


def resolve_request_id(headers: list[tuple[bytes, bytes]], header_name: str) -> str:
    """Return the client's request ID when it is safe to log, else a new UUID."""
    wanted = header_name.lower().encode("latin-1")
    for key, value in headers:
        if key.lower() == wanted:
            candidate = value.decode("latin-1").strip()
            if _REQUEST_ID_RE.match(candidate):
                return candidate
            break
    return str(uuid.uuid4())


class RequestIDMiddleware:
    """Attach a request ID to every HTTP exchange."""

    def __init__(self, app: ASGIApp, header_name: str = "X-Request-ID") -> None:
        self.app = app
        self.header_name = header_name

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request_id = resolve_request_id(scope.get("headers", []), self.header_name)
        scope.setdefault("state", {})["request_id"] = request_id
        header = (self.header_name.encode("latin-1"), request_id.encode("latin-1"))

        async def send_with_request_id(message: Message) -> None:
            if message["type"] == "http.response.start":
                message["headers"] = [*message.get("headers", []), header]
            await send(message)

        token = request_id_var.set(request_id)
        try:
            await self.app(scope, receive, send_with_request_id)
        finally:
            request_id_var.reset(token)
