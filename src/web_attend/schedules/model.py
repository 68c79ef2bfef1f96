from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ClassDay:
    """The ordered subject codes taught on one date."""

    classes: tuple[str, ...]
    date: str

    def to_payload(self) -> dict:
        return {"classes": list(self.classes), "date": self.date}
