"""Course levels, the level -> progress field table and progress aggregation."""
from dataclasses import dataclass
from enum import Enum

# A passed level quiz sets its category to a flat 25; four levels make 100.
LEVEL_INCREMENT = 25
COMPLETE_TOTAL = 100


class Level(str, Enum):
    FOUNDATION = "foundation"
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCE = "advance"


@dataclass(frozen=True)
class ProgressIncrement:
    field: str
    amount: int

    @property
    def update(self) -> dict[str, int]:
        """Partial update body understood by the user update endpoint."""
        return {f"progress.{self.field}": self.amount}


PROGRESS_TABLE: dict[Level, ProgressIncrement] = {
    Level.FOUNDATION: ProgressIncrement("foundation", LEVEL_INCREMENT),
    Level.BEGINNER: ProgressIncrement("beginner", LEVEL_INCREMENT),
    Level.INTERMEDIATE: ProgressIncrement("intermediate", LEVEL_INCREMENT),
    Level.ADVANCE: ProgressIncrement("advance", LEVEL_INCREMENT),
}

CATEGORIES = tuple(increment.field for increment in PROGRESS_TABLE.values())

LEVEL_DISPLAY = {
    Level.FOUNDATION: "Foundation",
    Level.BEGINNER: "Beginner",
    Level.INTERMEDIATE: "Intermediate",
    Level.ADVANCE: "Advance",
}


def progress_update_for(level: Level | str) -> dict[str, int]:
    """Return the update that records a passed quiz for level."""
    return PROGRESS_TABLE[Level(level)].update


def compute_total(progress: dict[str, int]) -> int:
    """Sum of the four category scores."""
    return sum(int(progress.get(field) or 0) for field in CATEGORIES)


def progress_percentage(total: int) -> int:
    """Clamp total to 0..100 for display."""
    return max(0, min(COMPLETE_TOTAL, total))


def is_certificate_eligible(total: int) -> bool:
    return total == COMPLETE_TOTAL
