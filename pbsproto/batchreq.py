"""Batch request types, reply choices and related request constants."""

from __future__ import annotations

from enum import IntEnum

__all__ = [
    "BatchRequestType",
    "BatchReplyChoice",
    "JobFile",
    "FileOption",
    "reqtype_to_txt",
    "PBS_BATCH_PROT_TYPE",
    "PBS_BATCH_PROT_VER",
    "PBS_BATCH_CEILING",
    "SCRIPT_CHUNK_Z",
    "NCONNECTS",
    "CREDENTIAL_TYPE_NONE",
]

PBS_BATCH_PROT_TYPE = 2
PBS_BATCH_PROT_VER = 1
SCRIPT_CHUNK_Z = 4096
"""Size of the chunks a job script is sent in."""
NCONNECTS = 5
CREDENTIAL_TYPE_NONE = 0

_GAP_FIRST = 30
_GAP_LAST = 47
_GAP_TEXT = "NONE"


class BatchRequestType(IntEnum):
    """Request type identifiers of the batch protocol."""

    CONNECT = 0
    QUEUE_JOB = 1
    JOB_CRED = 2
    JOBSCRIPT = 3
    RDY_TO_COMMIT = 4
    COMMIT = 5
    DELETE_JOB = 6
    HOLD_JOB = 7
    LOCATE_JOB = 8
    MANAGER = 9
    MESS_JOB = 10
    MODIFY_JOB = 11
    MOVE_JOB = 12
    RELEASE_JOB = 13
    RERUN = 14
    RUN_JOB = 15
    SELECT_JOBS = 16
    SHUTDOWN = 17
    SIGNAL_JOB = 18
    STATUS_JOB = 19
    STATUS_QUE = 20
    STATUS_SVR = 21
    TRACK_JOB = 22
    ASYRUN_JOB = 23
    RESCQ = 24
    RESERVE_RESC = 25
    RELEASE_RESC = 26
    CHECKPOINT_JOB = 27
    ASY_MODIFY_JOB = 28
    GSS_AUTHEN_USER = 29
    GAP030 = 30
    GAP031 = 31
    GAP032 = 32
    GAP033 = 33
    GAP034 = 34
    GAP035 = 35
    GAP036 = 36
    GAP037 = 37
    GAP038 = 38
    GAP039 = 39
    GAP040 = 40
    GAP041 = 41
    GAP042 = 42
    GAP043 = 43
    GAP044 = 44
    GAP045 = 45
    GAP046 = 46
    GAP047 = 47
    STAGE_IN = 48
    AUTHEN_USER = 49
    ORDER_JOB = 50
    SEL_STAT = 51
    REGIST_DEP = 52
    RETURN_FILES = 53
    COPY_FILES = 54
    DEL_FILES = 55
    JOB_OBIT = 56
    MV_JOB_FILE = 57
    STATUS_NODE = 58
    SCHEDULER_LOCK = 59
    DISCONNECT = 60
    ASY_SIGNAL_JOB = 61

    def is_gap(self) -> bool:
        """Return True if this identifier is a retired, unused slot."""
        return _GAP_FIRST <= self.value <= _GAP_LAST

    @property
    def text(self) -> str:
        """The name of the request type as shown to users and in logs."""
        if self.is_gap():
            return _GAP_TEXT
        return _TEXTS[self]


_TEXTS = {
    BatchRequestType.CONNECT: "Connect",
    BatchRequestType.QUEUE_JOB: "QueueJob",
    BatchRequestType.JOB_CRED: "JobCred",
    BatchRequestType.JOBSCRIPT: "JobScript",
    BatchRequestType.RDY_TO_COMMIT: "ReadyToCommit",
    BatchRequestType.COMMIT: "Commit",
    BatchRequestType.DELETE_JOB: "DeleteJob",
    BatchRequestType.HOLD_JOB: "HoldJob",
    BatchRequestType.LOCATE_JOB: "LocateJob",
    BatchRequestType.MANAGER: "Manager",
    BatchRequestType.MESS_JOB: "MessageJob",
    BatchRequestType.MODIFY_JOB: "ModifyJob",
    BatchRequestType.MOVE_JOB: "MoveJob",
    BatchRequestType.RELEASE_JOB: "ReleaseJob",
    BatchRequestType.RERUN: "RerunJob",
    BatchRequestType.RUN_JOB: "RunJob",
    BatchRequestType.SELECT_JOBS: "SelectJobs",
    BatchRequestType.SHUTDOWN: "Shutdown",
    BatchRequestType.SIGNAL_JOB: "SignalJob",
    BatchRequestType.STATUS_JOB: "StatusJob",
    BatchRequestType.STATUS_QUE: "StatusQueue",
    BatchRequestType.STATUS_SVR: "StatusServer",
    BatchRequestType.TRACK_JOB: "TrackJob",
    BatchRequestType.ASYRUN_JOB: "AsyncRunJob",
    BatchRequestType.RESCQ: "ResourceQuery",
    BatchRequestType.RESERVE_RESC: "ReserveResource",
    BatchRequestType.RELEASE_RESC: "ReleaseResource",
    BatchRequestType.CHECKPOINT_JOB: "CheckpointJob",
    BatchRequestType.ASY_MODIFY_JOB: "AsyncModifyJob",
    BatchRequestType.GSS_AUTHEN_USER: "GSSAuthenUser",
    BatchRequestType.STAGE_IN: "StageIn",
    BatchRequestType.AUTHEN_USER: "AuthenticateUser",
    BatchRequestType.ORDER_JOB: "OrderJob",
    BatchRequestType.SEL_STAT: "SelStat",
    BatchRequestType.REGIST_DEP: "RegisterDependency",
    BatchRequestType.RETURN_FILES: "ReturnFiles",
    BatchRequestType.COPY_FILES: "CopyFiles",
    BatchRequestType.DEL_FILES: "DeleteFiles",
    BatchRequestType.JOB_OBIT: "JobObituary",
    BatchRequestType.MV_JOB_FILE: "MoveJobFile",
    BatchRequestType.STATUS_NODE: "StatusNode",
    BatchRequestType.SCHEDULER_LOCK: "SchedulerLock",
    BatchRequestType.DISCONNECT: "Disconnect",
    BatchRequestType.ASY_SIGNAL_JOB: "AsyncSignalJob",
}

PBS_BATCH_CEILING = len(BatchRequestType)
"""One past the highest valid request type; used to reject bad requests."""


class BatchReplyChoice(IntEnum):
    """Discriminator of the body carried by a batch reply."""

    NULL = 1
    QUEUE = 2
    RDY_TO_COM = 3
    COMMIT = 4
    SELECT = 5
    STATUS = 6
    TEXT = 7
    LOCATE = 8
    RESC_QUERY = 9


class JobFile(IntEnum):
    """Standard files belonging to a job."""

    JSCRIPT = 0
    STDIN = 1
    STDOUT = 2
    STDERR = 3
    CHECKPOINT = 4


class FileOption(IntEnum):
    """Which output file a job message is written to."""

    DEFAULT = 0
    OFLG = 1
    EFLG = 2


def reqtype_to_txt(reqtype: int) -> str:
    """Return the text name of request type *reqtype*.

    Retired slots are named ``"NONE"``.  Raises ValueError if *reqtype* is
    not a valid request type.
    """
    try:
        request = BatchRequestType(reqtype)
    except ValueError:
        raise ValueError(f"unknown batch request type: {reqtype!r}") from None
    return request.text