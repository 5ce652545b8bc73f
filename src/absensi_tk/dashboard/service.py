from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..attendance import aggregator
from ..classes.service import ClassService
from ..state import AppState


@dataclass(frozen=True)
class DashboardSummary:
    total_students: int
    total_classes: int
    today: dict
    monthly: dict
    class_chart: list[dict]

    def as_dict(self) -> dict:
        return {
            "total_students": self.total_students,
            "total_classes": self.total_classes,
            "today": self.today,
            "monthly": self.monthly,
            "class_chart": self.class_chart,
        }


class DashboardService:
    def __init__(self, state: AppState, classes: ClassService):
        self._state = state
        self._classes = classes

    def summary(self, today: date) -> DashboardSummary:
        today_s = today.isoformat()
        records = self._state.attendance

        rates = aggregator.present_rates(records, today_s, today.month, today.year)
        counts = aggregator.tally(r for r in records if r.date == today_s)

        return DashboardSummary(
            total_students=len(self._state.students),
            total_classes=len(self._state.classes),
            today={
                "date": today_s,
                "hadir": counts.hadir,
                "sakit": counts.sakit,
                "izin": counts.izin,
                "alpha": counts.alpha,
                "rate": rates.daily_rate,
            },
            monthly={"rate": rates.monthly_rate, "count": rates.month_count},
            class_chart=[{"name": c["name"], "students": c["students"]} for c in self._classes.student_counts()],
        )
