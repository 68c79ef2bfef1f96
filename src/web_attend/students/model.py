from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union

from ..core.exceptions import ValidationError

StudentId = Union[int, str]


@dataclass(frozen=True)
class Student:
    """Domain entity: a student on the roster.

    Note: avatar and class are optional in the backend schema; display
    defaults are applied when rendering, not here.
    """

    id: StudentId
    name: str
    avatar: Optional[str] = None
    class_name: Optional[str] = None
    uid: Optional[str] = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Student":
        if "id" not in data or data["id"] is None:
            raise ValidationError("Student payload without id")
        return cls(
            id=data["id"],
            name=str(data.get("name") or ""),
            avatar=data.get("avatar") or None,
            class_name=data.get("class") or None,
            uid=data.get("uid") or None,
        )


def same_id(a: Optional[StudentId], b: Optional[StudentId]) -> bool:
    """Identifiers may arrive as int or str depending on the backend."""
    if a is None or b is None:
        return False
    return str(a) == str(b)


def find_student(students, student_id: Optional[StudentId]) -> Optional[Student]:
    for s in students:
        if same_id(s.id, student_id):
            return s
    return None
