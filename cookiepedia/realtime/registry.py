"""In-memory map of authenticated users to their live connection.

One connection per user: registering again replaces the previous entry
(last registration wins) and the displaced connection is left untouched.
"""

from __future__ import annotations

from typing import Any
from typing import Protocol


class Connection(Protocol):
    @property
    def is_open(self) -> bool: ...

    async def send_json(self, content: Any, close: bool = False) -> None: ...  # noqa: FBT001, FBT002


class ConnectionRegistry:
    def __init__(self) -> None:
        self._connections: dict[int, Connection] = {}

    def __len__(self) -> int:
        return len(self._connections)

    def __contains__(self, identity: object) -> bool:
        return identity in self._connections

    def register(self, identity: int, connection: Connection) -> Connection | None:
        """Store ``connection`` for ``identity`` and return the one it displaced."""

        previous = self._connections.get(identity)
        self._connections[identity] = connection
        if previous is connection:
            return None
        return previous

    def lookup(self, identity: int) -> Connection | None:
        return self._connections.get(identity)

    def unregister(self, identity: int, connection: Connection | None = None) -> bool:
        """Remove the entry for ``identity``; a no-op when absent.

        With ``connection`` given, the entry is only removed while it still
        points at that connection, so a replaced socket closing late does not
        evict its successor.
        """

        current = self._connections.get(identity)
        if current is None:
            return False
        if connection is not None and current is not connection:
            return False
        del self._connections[identity]
        return True

    def entries(self) -> list[tuple[int, Connection]]:
        return list(self._connections.items())

    def clear(self) -> None:
        self._connections.clear()
