"""Event types, event classes and severities used by the logging layer."""

from __future__ import annotations

from enum import IntEnum, IntFlag

__all__ = [
    "EventType",
    "EventClass",
    "Severity",
    "should_log",
    "PBSEVENT_MASK",
    "LOG_BUF_SIZE",
    "MAX_PATH_LEN",
    "SECS_PER_DAY",
]

LOG_BUF_SIZE = 16384
MAX_PATH_LEN = 1024
SECS_PER_DAY = 86400


class EventType(IntFlag):
    """Kinds of event that can be logged; combine them to form a mask."""

    ERROR = 0x0001
    SYSTEM = 0x0002
    ADMIN = 0x0004
    JOB = 0x0008
    JOB_USAGE = 0x0010
    SECURITY = 0x0020
    SCHED = 0x0040
    DEBUG = 0x0080
    DEBUG2 = 0x0100
    FORCE = 0x8000


PBSEVENT_MASK = 0x01FF
"""All event types that a log mask can select."""


class EventClass(IntEnum):
    """Kind of object an event is about."""

    SERVER = 1
    QUEUE = 2
    JOB = 3
    REQUEST = 4
    FILE = 5
    ACCT = 6
    NODE = 7


class Severity(IntEnum):
    """Severity of a logged message, from most to least urgent."""

    EMERG = 1
    ALERT = 2
    CRIT = 3
    ERR = 4
    WARNING = 6
    NOTICE = 7
    INFO = 8
    DEBUG = 9


def should_log(event: int, mask: int) -> bool:
    """Return True if *event* is selected by *mask* or is forced."""
    event = int(event)
    if event & EventType.FORCE:
        return True
    return bool(event & int(mask) & PBSEVENT_MASK)