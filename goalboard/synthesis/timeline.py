"""
ProgressTimeline: the single progress/elapsed-time model shared by every
module generator of one synthesis pass.

The plan starts elapsed_days before today, so the completed share of any
schedule lies in the past and the rest lies ahead.
"""
from dataclasses import dataclass
from datetime import date, timedelta
from random import Random
from typing import Optional


@dataclass(frozen=True)
class ProgressTimeline:
    today: date
    target_date: date
    total_days: int
    elapsed_days: int
    progress_fraction: float

    @property
    def start_date(self) -> date:
        return self.today - timedelta(days=self.elapsed_days)

    @property
    def days_remaining(self) -> int:
        return max(0, self.total_days - self.elapsed_days)

    @property
    def percent_complete(self) -> int:
        return int(round(self.progress_fraction * 100))

    def date_at(self, day_offset: float) -> date:
        """Calendar date day_offset days into the plan."""
        return self.start_date + timedelta(days=int(round(day_offset)))

    @property
    def projected_completion(self) -> date:
        return self.target_date

    def to_dict(self) -> dict:
        return {
            "totalDays": self.total_days,
            "elapsedDays": self.elapsed_days,
            "progressFraction": round(self.progress_fraction, 4),
            "daysRemaining": self.days_remaining,
            "percentComplete": self.percent_complete,
        }


def clamp_progress(value: float) -> float:
    return max(0.0, min(1.0, float(value)))


def build_timeline(
    today: date,
    target_date: date,
    rng: Random,
    progress: Optional[float] = None,
    draw_max: float = 0.6,
) -> ProgressTimeline:
    """
    Explicit progress is clamped to [0, 1]; otherwise it is drawn from
    uniform(0, draw_max) using rng.
    """
    total_days = max(0, (target_date - today).days)
    if progress is None:
        fraction = rng.uniform(0.0, draw_max)
    else:
        fraction = clamp_progress(progress)
    return ProgressTimeline(
        today=today,
        target_date=target_date,
        total_days=total_days,
        elapsed_days=int(round(total_days * fraction)),
        progress_fraction=fraction,
    )
