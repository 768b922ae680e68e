"""Connection bookkeeping, protocol numbers and server limits of the network layer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, IntFlag

__all__ = [
    "ConnType",
    "Protocol",
    "InterServerMessage",
    "ConnectionFlag",
    "SocketType",
    "Connection",
    "Listener",
    "MoveType",
    "RecoveryMode",
    "next_sequence_number",
    "PBS_NET_MAXCONNECTIDLE",
    "PBS_NET_RC_FATAL",
    "PBS_NET_RC_RETRY",
    "PBS_NET_MAX_CONNECTIONS",
    "PBS_LOCAL_CONNECTION",
    "MAXLISTENERS",
    "TSOCK_PATH",
    "PBS_JOBBASE",
    "PBS_NUMJOBSTATE",
    "PBS_MAX_HOPCOUNT",
    "PBS_SEQNUMTOP",
    "TORQUE_LISTENQUEUE",
    "PBS_NET_RETRY_TIME",
    "PBS_NET_RETRY_LIMIT",
    "PBS_SCHEDULE_CYCLE",
    "PBS_RESTAT_JOB",
    "PBS_STAGEFAIL_WAIT",
    "PBS_NORMAL_PING_RATE",
    "PBS_TCPTIMEOUT",
    "PBS_JOBSTAT_MIN",
    "PBS_POLLJOBS",
    "PBS_LOG_CHECK_RATE",
    "PBS_ACCT_CHECK_RATE",
    "PBS_LOCKFILE_UPDATE_TIME",
    "PBS_LOCKFILE_CHECK_TIME",
    "PBS_DEFAULT_MAIL",
    "PBS_DEFAULT_ADMIN",
    "PBS_ROOT_ALWAYS_ADMIN",
    "SERVER_PATHS",
]

PBS_NET_MAXCONNECTIDLE = 900
"""Seconds a connection may stay silent before it is considered idle."""

PBS_NET_RC_FATAL = -1
PBS_NET_RC_RETRY = -2

PBS_NET_MAX_CONNECTIONS = 10240
PBS_LOCAL_CONNECTION = PBS_NET_MAX_CONNECTIONS
MAXLISTENERS = 3
TSOCK_PATH = "/tmp/.torque-unix"

PBS_JOBBASE = 61
PBS_NUMJOBSTATE = 6
PBS_MAX_HOPCOUNT = 10
PBS_SEQNUMTOP = 99999999
"""Highest job sequence number; numbering restarts at zero after it."""
TORQUE_LISTENQUEUE = 10

PBS_NET_RETRY_TIME = 30
PBS_NET_RETRY_LIMIT = 14400
PBS_SCHEDULE_CYCLE = 600
PBS_RESTAT_JOB = 45
PBS_STAGEFAIL_WAIT = 1800
PBS_NORMAL_PING_RATE = 300
PBS_TCPTIMEOUT = 6
PBS_JOBSTAT_MIN = 4
PBS_POLLJOBS = True
PBS_LOG_CHECK_RATE = 300
PBS_ACCT_CHECK_RATE = 60 * 60
PBS_LOCKFILE_UPDATE_TIME = 3
PBS_LOCKFILE_CHECK_TIME = 9

PBS_DEFAULT_MAIL = "adm"
PBS_DEFAULT_ADMIN = "root"
PBS_ROOT_ALWAYS_ADMIN = True

SERVER_PATHS = {
    "private": "server_priv",
    "acct": "accounting",
    "arrays": "arrays",
    "jobs": "jobs",
    "spool": "spool",
    "checkpoint": "checkpoint",
    "queues": "queues",
    "logs": "server_logs",
    "accounting": "accounting",
    "serverdb": "serverdb",
    "svracl": "acl_svr",
    "tracking": "tracking",
    "nodes": "nodes",
    "node_status": "node_status",
    "node_note": "node_note",
}
"""Names of the files and directories in the server's home."""


class ConnType(IntEnum):
    """What a connection is used for, or IDLE when unused."""

    PRIMARY = 0
    SECONDARY = 1
    FROM_CLIENT_ASN = 2
    FROM_CLIENT_DIS = 3
    TO_SERVER_ASN = 4
    TO_SERVER_DIS = 5
    TASK_MANAGER_DIS = 6
    IDLE = 7


class Protocol(IntEnum):
    """Protocol numbers of the daemons' communication."""

    RM = 1
    TM = 2
    IM = 3
    IS = 4

    @property
    def version(self) -> int:
        """Version number of this protocol."""
        return 1


class InterServerMessage(IntEnum):
    """Message types of the inter-server protocol."""

    NULL = 0
    HELLO = 1
    CLUSTER_ADDRS = 2
    UPDATE = 3
    STATUS = 4


class ConnectionFlag(IntFlag):
    """Authentication and handling flags of a connection."""

    NONE = 0
    AUTHENTICATED = 1
    FROM_PRIVIL = 2
    NOTIMEOUT = 4
    GSSAPIAUTH = 8


class SocketType(IntEnum):
    """Address family of a connection's socket."""

    UNIX = 1
    INET = 2


@dataclass
class Connection:
    """State kept by the server for one open socket."""

    addr: int = 0
    port: int = 0
    handle: int = -1
    authen: ConnectionFlag = ConnectionFlag.NONE
    socktype: SocketType = SocketType.INET
    active: ConnType = ConnType.IDLE
    lasttime: float = 0.0
    schlock: bool = False

    def is_idle(self, now: float) -> bool:
        """Return True if the connection has been silent too long at *now*.

        Connections flagged NOTIMEOUT never become idle.
        """
        if self.authen & ConnectionFlag.NOTIMEOUT:
            return False
        return now - self.lasttime > PBS_NET_MAXCONNECTIDLE

    def touch(self, now: float) -> None:
        """Record activity on the connection at *now*."""
        self.lasttime = now


@dataclass(frozen=True)
class Listener:
    """A socket the server listens on."""

    address: int
    port: int
    sock: int


class MoveType(IntEnum):
    """Reason a job is moved."""

    MOVE = 1
    ROUTE = 2
    EXEC = 3
    MGR_MV = 4
    ORDER = 5


class RecoveryMode(IntEnum):
    """How the server recovers jobs when it starts."""

    HOT = 0
    WARM = 1
    COLD = 2
    CREATE = 4
    INVALID = 5


def next_sequence_number(current: int) -> int:
    """Return the job sequence number that follows *current*.

    Numbering restarts at zero once PBS_SEQNUMTOP is reached.  Raises
    ValueError for a negative or out of range *current*.
    """
    if current < 0 or current > PBS_SEQNUMTOP:
        raise ValueError(f"sequence number out of range: {current!r}")
    if current >= PBS_SEQNUMTOP:
        return 0
    return current + 1