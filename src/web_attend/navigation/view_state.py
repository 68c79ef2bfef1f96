from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional

from ..core.enums import Tab
from ..students.model import StudentId

SESSION_KEY = "view_state"

_TITLES = {
    Tab.DASHBOARD: "Dashboard",
    Tab.STUDENTS: "Student Management",
    Tab.REPORTS: "Attendance Reports",
}


@dataclass(frozen=True)
class ViewState:
    """Which tab is showing and whether a student detail overlays it.

    Selecting a student leaves the tab untouched, so going back restores it.
    Navigating to a tab always drops the selection first.
    """

    tab: Tab = Tab.DASHBOARD
    selected_student_id: Optional[StudentId] = None

    @property
    def has_selection(self) -> bool:
        return self.selected_student_id is not None

    @property
    def highlighted_tab(self) -> Tab:
        return Tab.STUDENTS if self.has_selection else self.tab

    @property
    def header_title(self) -> str:
        if self.has_selection:
            return "Student Details"
        return _TITLES[self.tab]

    def select(self, student_id: StudentId) -> "ViewState":
        return replace(self, selected_student_id=student_id)

    def back(self) -> "ViewState":
        return replace(self, selected_student_id=None)

    def navigate(self, tab: Tab) -> "ViewState":
        return ViewState(tab=tab, selected_student_id=None)

    def to_session(self) -> dict:
        return {"tab": self.tab.value, "student_id": self.selected_student_id}

    @classmethod
    def from_session(cls, data: Optional[Mapping[str, Any]]) -> "ViewState":
        if not data:
            return cls()
        try:
            tab = Tab(data.get("tab", Tab.DASHBOARD.value))
        except (ValueError, AttributeError):
            return cls()
        student_id = data.get("student_id")
        if not isinstance(student_id, (int, str)) or isinstance(student_id, bool):
            student_id = None
        return cls(tab=tab, selected_student_id=student_id)
