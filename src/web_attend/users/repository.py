from __future__ import annotations

from typing import Protocol


class OperatorRepository(Protocol):
    """Credential check delegated to the backend."""

    def login(self, email: str, password: str) -> None:
        """Return on success, raise AuthenticationError with the backend's message otherwise."""

        raise NotImplementedError
