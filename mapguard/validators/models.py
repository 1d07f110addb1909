"""Validation models: severity levels and the violation record.

Severity ordering lives in an explicit rank table, never in declaration order:
reordering the members below must not change which level is worse.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Level(str, Enum):
    """Constraint violation severity levels, most severe first."""

    FATAL = "fatal"      # Mapping is broken, must not be used
    SEVERE = "severe"    # Mapping works but will very likely misbehave
    WARNING = "warning"  # Questionable construct, should be addressed
    INFO = "info"        # Worth knowing, not a problem
    MINOR = "minor"      # Cosmetic

    @property
    def rank(self) -> int:
        """Numeric rank; lower is more severe."""
        return LEVEL_RANKS[self]

    def is_at_least(self, threshold: "Level") -> bool:
        """True if this level is as severe as ``threshold`` or worse."""
        return self.rank <= threshold.rank


LEVEL_RANKS = {
    Level.FATAL: 0,
    Level.SEVERE: 1,
    Level.WARNING: 2,
    Level.INFO: 3,
    Level.MINOR: 4,
}


class Violation(BaseModel):
    """A single constraint violation.

    Frozen, so equal violations hash equally and collapse in a ViolationSet.
    """

    model_config = ConfigDict(frozen=True)

    level: Level
    prefix: str   # "<module>.<Class>.<field>" or "<module>.<Class>."
    message: str  # Fully rendered, ready for display

    def render(self) -> str:
        return self.message

    def get_prefix(self) -> str:
        return self.prefix

    def get_level(self) -> Level:
        return self.level

    def __str__(self) -> str:
        return self.render()
