from __future__ import annotations

from typing import Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    """Repository interface for the student roster.

    Note: services depend on this interface, never on the HTTP client directly.
    """

    def list_all(self) -> Sequence[Student]:
        raise NotImplementedError
