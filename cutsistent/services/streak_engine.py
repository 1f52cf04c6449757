"""
Streak Engine

Pure rules behind the sugar-free streak: daily aggregation of food entries,
the streak scan, the point policy and badge thresholds. Nothing here touches
the database or the wall clock; callers pass "today" explicitly.
"""

from dataclasses import dataclass
from decimal import Decimal
from datetime import date, timedelta, tzinfo
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from cutsistent.utils.dates import local_date

# ============================================================================
# Constants
# ============================================================================

SUGAR_LIMIT = 25.0
# Grams are stored with two decimals; totals are compared at that precision
GRAM_PRECISION = Decimal("0.01")
DAILY_SUGAR_FREE_POINTS = 10
STREAK_DAY_POINTS = 100
STREAK_BREAK_PENALTY = 150

# Badge thresholds (days of streak)
ELITE_STREAK = 30
WARRIOR_STREAK = 21
DEDICATED_STREAK = 14
STARTER_STREAK = 7
CHAMPION_MAX_RANK = 3


@dataclass(frozen=True)
class EngineSettings:
    zone: Optional[tzinfo] = None
    sugar_limit: float = SUGAR_LIMIT
    daily_sugar_free_points: int = DAILY_SUGAR_FREE_POINTS
    streak_day_points: int = STREAK_DAY_POINTS
    streak_break_penalty: int = STREAK_BREAK_PENALTY


def to_grams(value) -> Decimal:
    """Exact decimal grams; floats go through their shortest repr."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value or 0))


def round_grams(value) -> Decimal:
    return to_grams(value).quantize(GRAM_PRECISION)


@dataclass
class DailyTotals:
    calories: Decimal = Decimal(0)
    protein: Decimal = Decimal(0)
    carbs: Decimal = Decimal(0)
    sugar: Decimal = Decimal(0)

    def add(self, entry) -> None:
        self.calories += to_grams(entry.calories)
        self.protein += to_grams(entry.protein)
        self.carbs += to_grams(entry.carbs)
        self.sugar += to_grams(entry.sugar)


@dataclass(frozen=True)
class StreakState:
    current_streak: int = 0
    longest_streak: int = 0
    total_points: int = 0


@dataclass(frozen=True)
class StreakUpdate:
    previous: StreakState
    current_streak: int
    longest_streak: int
    total_points: int

    @property
    def points_delta(self) -> int:
        return self.total_points - self.previous.total_points

    @property
    def broken(self) -> bool:
        return self.current_streak == 0 and self.previous.current_streak > 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "current_streak": self.current_streak,
            "longest_streak": self.longest_streak,
            "total_points": self.total_points,
            "previous_streak": self.previous.current_streak,
            "points_delta": self.points_delta,
        }


# ============================================================================
# Daily aggregation
# ============================================================================

def is_sugar_free(total_sugar, sugar_limit: float = SUGAR_LIMIT) -> bool:
    return round_grams(total_sugar) <= to_grams(sugar_limit)


def daily_points(sugar_free: bool, points: int = DAILY_SUGAR_FREE_POINTS) -> int:
    return points if sugar_free else 0


def aggregate_by_date(entries: Iterable, zone: Optional[tzinfo] = None) -> Dict[date, DailyTotals]:
    """
    Sum food entries per calendar day.

    Args:
        entries: Objects with ``logged_at``, ``calories``, ``protein``,
            ``carbs`` and ``sugar`` attributes
        zone: Zone whose calendar days are used, None for the local zone

    Returns:
        Mapping of day to its totals, only for days with at least one entry
    """
    totals: Dict[date, DailyTotals] = {}
    for entry in entries:
        day = local_date(entry.logged_at, zone)
        totals.setdefault(day, DailyTotals()).add(entry)
    return totals


# ============================================================================
# Streak scan
# ============================================================================

def scan_streak(
    days: Sequence[Tuple[date, Decimal]],
    today: date,
    sugar_limit: float = SUGAR_LIMIT,
) -> int:
    """
    Count consecutive sugar-free days ending at the most recent logged day.

    The run only counts when the most recent day is ``today`` or the day
    before. It stops at the first missing day or the first day over the
    sugar limit.

    Args:
        days: (day, total sugar) pairs, one per day
        today: Reference date of the computation
        sugar_limit: Grams of sugar a day may hold and still count

    Returns:
        Current streak length in days
    """
    if not days:
        return 0

    ordered = sorted(days, key=lambda pair: pair[0], reverse=True)
    most_recent = ordered[0][0]
    if most_recent not in (today, today - timedelta(days=1)):
        return 0

    streak = 0
    expected = most_recent
    for day, sugar in ordered:
        if day != expected:
            break
        if not is_sugar_free(sugar, sugar_limit):
            break
        streak += 1
        expected = expected - timedelta(days=1)
    return streak


# ============================================================================
# Points
# ============================================================================

def apply_streak(
    state: StreakState,
    new_streak: int,
    streak_day_points: int = STREAK_DAY_POINTS,
    streak_break_penalty: int = STREAK_BREAK_PENALTY,
) -> StreakUpdate:
    """
    Derive the profile's new streak fields from a freshly scanned streak.

    Growth earns points per added day, a broken streak costs a flat penalty
    floored at zero, any other change leaves the points as they are.
    """
    total_points = state.total_points
    if new_streak > state.current_streak:
        total_points += (new_streak - state.current_streak) * streak_day_points
    elif new_streak == 0 and state.current_streak > 0:
        total_points = max(0, total_points - streak_break_penalty)

    return StreakUpdate(
        previous=state,
        current_streak=new_streak,
        longest_streak=max(state.longest_streak, new_streak),
        total_points=total_points,
    )


def calculate_badges(streak: int, rank: int) -> List[str]:
    """Badges shown next to a leaderboard row."""
    badges = []
    if streak >= ELITE_STREAK:
        badges.append("elite")
    if streak >= WARRIOR_STREAK:
        badges.append("warrior")
    if rank <= CHAMPION_MAX_RANK:
        badges.append("champion")
    if streak >= DEDICATED_STREAK:
        badges.append("dedicated")
    if streak >= STARTER_STREAK:
        badges.append("starter")
    return badges
