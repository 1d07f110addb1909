import pydantic
import pytest

from mapguard.exceptions import MappingValidationError
from mapguard.validators.models import LEVEL_RANKS, Level, Violation


def test_every_level_has_a_rank():
    assert set(LEVEL_RANKS) == set(Level)
    assert len(set(LEVEL_RANKS.values())) == len(Level)


def test_ranks_order_levels_from_most_to_least_severe():
    ordered = sorted(Level, key=lambda level: level.rank)

    assert ordered == [Level.FATAL, Level.SEVERE, Level.WARNING, Level.INFO, Level.MINOR]


@pytest.mark.parametrize(
    "level, threshold, expected",
    [
        (Level.FATAL, Level.FATAL, True),
        (Level.SEVERE, Level.FATAL, False),
        (Level.FATAL, Level.SEVERE, True),
        (Level.SEVERE, Level.SEVERE, True),
        (Level.MINOR, Level.INFO, False),
        (Level.MINOR, Level.MINOR, True),
    ],
)
def test_is_at_least(level, threshold, expected):
    assert level.is_at_least(threshold) is expected


def test_violations_with_same_fields_are_equal_and_hash_equal():
    a = Violation(level=Level.WARNING, prefix="app.User.", message="msg")
    b = Violation(level=Level.WARNING, prefix="app.User.", message="msg")

    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


@pytest.mark.parametrize(
    "other",
    [
        Violation(level=Level.INFO, prefix="app.User.", message="msg"),
        Violation(level=Level.WARNING, prefix="app.Order.", message="msg"),
        Violation(level=Level.WARNING, prefix="app.User.", message="other"),
    ],
)
def test_violations_differing_in_any_field_are_distinct(other):
    assert Violation(level=Level.WARNING, prefix="app.User.", message="msg") != other


def test_violation_is_immutable():
    violation = Violation(level=Level.INFO, prefix="app.User.", message="msg")

    with pytest.raises(pydantic.ValidationError):
        violation.level = Level.FATAL


def test_violation_accessors():
    violation = Violation(level=Level.MINOR, prefix="app.User.name", message="rendered text")

    assert violation.render() == "rendered text"
    assert str(violation) == "rendered text"
    assert violation.get_prefix() == "app.User.name"
    assert violation.get_level() is Level.MINOR


def test_violation_rejects_unknown_level():
    with pytest.raises(pydantic.ValidationError):
        Violation(level="catastrophic", prefix="app.User.", message="msg")


def test_validation_error_lists_every_violation():
    violations = [
        Violation(level=Level.FATAL, prefix="app.A.", message="first"),
        Violation(level=Level.INFO, prefix="app.B.", message="second"),
    ]

    error = MappingValidationError(violations)

    assert error.violations == tuple(violations)
    assert str(error) == "Number of violations: 2\nfirst\nsecond"
