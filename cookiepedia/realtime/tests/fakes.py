from __future__ import annotations

from typing import Any


class FakeConnection:
    """Records what the hub pushes instead of writing to a socket."""

    def __init__(self, *, is_open: bool = True, fail: bool = False) -> None:
        self.is_open = is_open
        self.fail = fail
        self.sent: list[dict[str, Any]] = []

    async def send_json(self, content: Any, close: bool = False) -> None:  # noqa: FBT001, FBT002
        if self.fail:
            msg = "socket write failed"
            raise ConnectionResetError(msg)
        self.sent.append(content)

    def kinds(self) -> list[str]:
        return [event["kind"] for event in self.sent]
