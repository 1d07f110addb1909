import threading

from mapguard.validators import Level, ViolationSet

from _mapping_helpers import make_violation


def test_empty_set():
    violations = ViolationSet()

    assert len(violations) == 0
    assert not violations
    assert violations.worst() is None
    assert list(violations) == []


def test_identical_violations_are_stored_once():
    violations = ViolationSet()

    assert violations.add(make_violation(Level.SEVERE, "app.User.", "dup")) is True
    assert violations.add(make_violation(Level.SEVERE, "app.User.", "dup")) is False

    assert len(violations) == 1
    assert make_violation(Level.SEVERE, "app.User.", "dup") in violations


def test_worst_is_the_most_severe_entry():
    violations = ViolationSet()
    for level in (Level.INFO, Level.MINOR, Level.FATAL, Level.WARNING):
        violations.add(make_violation(level))

    assert violations.worst().level is Level.FATAL


def test_iteration_is_worst_first_with_ties_in_insertion_order():
    violations = ViolationSet()
    first_warning = make_violation(Level.WARNING, "app.Z.", "first")
    minor = make_violation(Level.MINOR, "app.A.")
    severe = make_violation(Level.SEVERE, "app.M.")
    second_warning = make_violation(Level.WARNING, "app.A.", "second")
    for violation in (first_warning, minor, severe, second_warning):
        violations.add(violation)

    assert list(violations) == [severe, first_warning, second_warning, minor]


def test_snapshot_is_not_affected_by_later_adds():
    violations = ViolationSet()
    violations.add(make_violation(Level.INFO))
    snapshot = violations.snapshot()

    violations.add(make_violation(Level.FATAL))

    assert len(snapshot) == 1
    assert len(violations) == 2


def test_concurrent_adds_keep_set_semantics():
    violations = ViolationSet()
    shared = [make_violation(Level.WARNING, f"app.Shared{i}.") for i in range(50)]

    def worker(n):
        for violation in shared:
            violations.add(violation)
        violations.add(make_violation(Level.INFO, f"app.Worker{n}."))

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(violations) == 58
    assert len(list(violations)) == 58
    assert violations.worst().level is Level.WARNING
