from pbsproto.events import (
    PBSEVENT_MASK,
    EventClass,
    EventType,
    Severity,
    should_log,
)

import pytest


def test_forced_event_logged_with_empty_mask():
    assert should_log(EventType.FORCE | EventType.DEBUG, 0) is True


def test_event_in_mask_logged():
    mask = EventType.ERROR | EventType.JOB
    assert should_log(EventType.JOB, mask) is True


def test_event_outside_mask_not_logged():
    mask = EventType.ERROR | EventType.JOB
    assert should_log(EventType.DEBUG2, mask) is False


def test_empty_mask_logs_nothing_unforced():
    assert not any(should_log(e, 0) for e in EventType if e != EventType.FORCE)


def test_full_mask_logs_every_type():
    assert all(should_log(e, PBSEVENT_MASK) for e in EventType)


def test_composite_event_logged_if_any_part_selected():
    assert should_log(EventType.ADMIN | EventType.SCHED, EventType.SCHED) is True


def test_plain_int_arguments_accepted():
    assert should_log(int(EventType.SYSTEM), int(EventType.SYSTEM)) is True


def test_mask_covers_all_but_force():
    for e in EventType:
        if e == EventType.FORCE:
            assert should_log(e, 0) is True
        else:
            assert should_log(e, int(PBSEVENT_MASK) & ~int(e)) is False


def test_event_types_select_only_themselves():
    unforced = [e for e in EventType if e != EventType.FORCE]
    for a in unforced:
        for b in unforced:
            assert should_log(a, int(b)) is (a == b)


def test_event_class_order():
    assert [EventClass(i).name for i in range(1, 8)] == [
        "SERVER", "QUEUE", "JOB", "REQUEST", "FILE", "ACCT", "NODE",
    ]


def test_severity_most_urgent_first():
    ordered = [Severity(s.value) for s in sorted(Severity)]
    assert [s.name for s in ordered] == [
        "EMERG", "ALERT", "CRIT", "ERR", "WARNING", "NOTICE", "INFO", "DEBUG",
    ]
    with pytest.raises(ValueError):
        Severity(int(Severity.DEBUG) + 1)