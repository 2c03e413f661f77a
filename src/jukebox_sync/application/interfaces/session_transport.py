"""Port interface for delivering events to connected client sessions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class SessionTransport(ABC):
    """Interface for pushing a named event to one transport session."""

    @abstractmethod
    async def send(self, session_id: str, event: str, payload: dict[str, Any]) -> None:
        """Deliver ``payload`` under ``event`` to a single session.

        Implementations raise on delivery failure; the gateway isolates the
        failure to that session.
        """
        ...
