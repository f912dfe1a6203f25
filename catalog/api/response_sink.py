"""Buffered Response — ResponseSink that turns one send() into an HTTP response.

Invariants:
    - send() accepts exactly one payload per instance
    - list payload -> JSON array; str payload -> text/plain
    - Status is always 200 (handlers signal "nothing found" through the payload)
"""

from fastapi.responses import JSONResponse, PlainTextResponse, Response

_UNSENT = object()


class BufferedResponse:
    """Collects the payload a handler sends, for rendering after it returns."""

    def __init__(self):
        self._payload = _UNSENT

    @property
    def sent(self) -> bool:
        return self._payload is not _UNSENT

    def send(self, payload: str | list[str]) -> None:
        if self.sent:
            raise RuntimeError("Response already sent")
        self._payload = payload

    def to_response(self) -> Response:
        if not self.sent:
            raise RuntimeError("Handler did not send a response")
        if isinstance(self._payload, str):
            return PlainTextResponse(self._payload)
        return JSONResponse(content=list(self._payload))
