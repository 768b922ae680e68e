"""Public batch interface types: operators, attribute lists and status."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

__all__ = [
    "BatchOp",
    "Attribute",
    "BatchStatus",
    "ManagerCommand",
    "ManagerObject",
    "ShutdownManner",
    "MessageFile",
    "ATTR_RESOURCE_SEPARATOR",
    "PBS_MAXHOSTNAME",
    "MAXPATHLEN",
    "MAXNAMLEN",
    "MAX_NOTE",
    "PBS_MAXUSER",
    "PBS_MAXGRPN",
    "PBS_MAXQUEUENAME",
    "PBS_MAXSERVERNAME",
    "PBS_MAXJOBARRAYLEN",
    "PBS_MAXSEQNUM",
    "PBS_MAXPORTNUM",
    "PBS_MAXJOBARRAY",
    "PBS_MAXSVRJOBID",
    "PBS_MAXCLTJOBID",
    "PBS_MAXDEST",
    "PBS_MAXROUTEDEST",
    "PBS_TERM_BUF_SZ",
    "PBS_TERM_CCA",
    "PBS_QS_VERSION_BASE",
    "PBS_QS_VERSION_INT",
    "PBS_QS_VERSION",
    "MAX_ENCODE_BFR",
    "RESOURCE_T_NULL",
    "RESOURCE_T_ALL",
    "USER_HOLD",
    "OTHER_HOLD",
    "SYSTEM_HOLD",
    "NO_HOLD",
    "NO_JOIN",
    "NO_KEEP",
    "MAIL_AT_ABORT",
    "CHECKPOINT_UNSPECIFIED",
    "SIG_RESUME",
    "SIG_SUSPEND",
]

ATTR_RESOURCE_SEPARATOR = "."
"""Separator between attribute name and resource in flattened keys."""

PBS_MAXHOSTNAME = 1024
MAXPATHLEN = 1024
MAXNAMLEN = 255
MAX_NOTE = 256
PBS_MAXUSER = 120
PBS_MAXGRPN = 16
PBS_MAXQUEUENAME = 15
PBS_MAXSERVERNAME = PBS_MAXHOSTNAME
PBS_MAXJOBARRAYLEN = 6
PBS_MAXSEQNUM = 8
PBS_MAXPORTNUM = 5
PBS_MAXJOBARRAY = 99999
PBS_MAXSVRJOBID = (
    PBS_MAXSEQNUM + PBS_MAXSERVERNAME + PBS_MAXPORTNUM + PBS_MAXJOBARRAYLEN + 2
)
PBS_MAXCLTJOBID = (
    PBS_MAXSVRJOBID + PBS_MAXSERVERNAME + PBS_MAXPORTNUM + PBS_MAXJOBARRAYLEN + 2
)
PBS_MAXDEST = 1024
PBS_MAXROUTEDEST = PBS_MAXQUEUENAME + PBS_MAXSERVERNAME + PBS_MAXPORTNUM + 2
PBS_TERM_BUF_SZ = 80
PBS_TERM_CCA = 6

PBS_QS_VERSION_BASE = 0x00020300
PBS_QS_VERSION_INT = 1
PBS_QS_VERSION = PBS_QS_VERSION_BASE + PBS_QS_VERSION_INT

MAX_ENCODE_BFR = 100

RESOURCE_T_NULL = 0
RESOURCE_T_ALL = -1

USER_HOLD = "u"
OTHER_HOLD = "o"
SYSTEM_HOLD = "s"
NO_HOLD = "n"
NO_JOIN = "n"
NO_KEEP = "n"
MAIL_AT_ABORT = "a"
CHECKPOINT_UNSPECIFIED = "u"

SIG_RESUME = "resume"
SIG_SUSPEND = "suspend"


class BatchOp(IntEnum):
    """Operator applied to an attribute in a request or selection."""

    SET = 0
    UNSET = 1
    INCR = 2
    DECR = 3
    EQ = 4
    NE = 5
    GE = 6
    GT = 7
    LE = 8
    LT = 9
    DFLT = 10
    MERGE = 11


@dataclass(frozen=True)
class Attribute:
    """A named attribute, optionally qualified by a resource, with a value."""

    name: str
    value: str | None = None
    resource: str | None = None
    op: BatchOp = BatchOp.SET

    @property
    def key(self) -> str:
        """The attribute name, joined with its resource when there is one."""
        if self.resource is None:
            return self.name
        return f"{self.name}{ATTR_RESOURCE_SEPARATOR}{self.resource}"


@dataclass
class BatchStatus:
    """Status of one object (job, queue, server or node) as reported."""

    name: str
    attribs: list[Attribute] = field(default_factory=list)
    text: str | None = None

    def find(self, name: str, resource: str | None = None) -> Attribute | None:
        """Return the first attribute with *name* and *resource*, or None."""
        return next(
            (a for a in self.attribs if a.name == name and a.resource == resource),
            None,
        )

    def as_dict(self) -> dict[str, str | None]:
        """Map each attribute key to its value; later entries win."""
        return {a.key: a.value for a in self.attribs}


class ManagerCommand(IntEnum):
    """Commands of a manager request."""

    CREATE = 0
    DELETE = 1
    SET = 2
    UNSET = 3
    LIST = 4
    PRINT = 5
    ACTIVE = 6


class ManagerObject(IntEnum):
    """Kinds of object a manager request can act on."""

    NONE = -1
    SERVER = 0
    QUEUE = 1
    JOB = 2
    NODE = 3


class ShutdownManner(IntEnum):
    """How the server is asked to shut down."""

    SIG = -1
    IMMEDIATE = 0
    DELAY = 1
    QUICK = 2


class MessageFile(IntEnum):
    """Job output file that a message is appended to."""

    OUT = 1
    ERR = 2