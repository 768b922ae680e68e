import pytest

from pbsproto.batchreq import (
    PBS_BATCH_CEILING,
    BatchReplyChoice,
    BatchRequestType,
    FileOption,
    JobFile,
    reqtype_to_txt,
)


@pytest.mark.parametrize(
    "member, value",
    [
        (BatchRequestType.CONNECT, 0),
        (BatchRequestType.MESS_JOB, 10),
        (BatchRequestType.STATUS_QUE, 20),
        (BatchRequestType.GAP030, 30),
        (BatchRequestType.GAP040, 40),
        (BatchRequestType.ORDER_JOB, 50),
    ],
)
def test_documented_values(member, value):
    assert member == value


def test_values_are_contiguous_up_to_ceiling():
    values = [member.value for member in BatchRequestType]
    assert values == list(range(PBS_BATCH_CEILING))
    texts = [reqtype_to_txt(v) for v in range(PBS_BATCH_CEILING)]
    assert texts[0] == "Connect"
    assert texts[-1] == "AsyncSignalJob"


@pytest.mark.parametrize(
    "reqtype, text",
    [
        (0, "Connect"),
        (BatchRequestType.JOBSCRIPT, "JobScript"),
        (BatchRequestType.RDY_TO_COMMIT, "ReadyToCommit"),
        (BatchRequestType.MESS_JOB, "MessageJob"),
        (BatchRequestType.STATUS_QUE, "StatusQueue"),
        (BatchRequestType.RESCQ, "ResourceQuery"),
        (BatchRequestType.AUTHEN_USER, "AuthenticateUser"),
        (BatchRequestType.JOB_OBIT, "JobObituary"),
        (BatchRequestType.DISCONNECT, "Disconnect"),
        (BatchRequestType.ASY_SIGNAL_JOB, "AsyncSignalJob"),
    ],
)
def test_reqtype_to_txt(reqtype, text):
    assert reqtype_to_txt(reqtype) == text


def test_gap_types_are_named_none():
    gaps = [member for member in BatchRequestType if member.is_gap()]
    assert gaps[0] is BatchRequestType.GAP030
    assert gaps[-1] is BatchRequestType.GAP047
    assert all(reqtype_to_txt(member) == "NONE" for member in gaps)


def test_only_gaps_are_named_none():
    for member in BatchRequestType:
        assert (reqtype_to_txt(member) == "NONE") == member.is_gap()


def test_stage_in_follows_gaps():
    assert not BatchRequestType.STAGE_IN.is_gap()
    assert BatchRequestType.STAGE_IN == BatchRequestType.GAP047 + 1
    assert not BatchRequestType.GSS_AUTHEN_USER.is_gap()


def test_text_names_are_unique():
    texts = [reqtype_to_txt(m) for m in BatchRequestType if not m.is_gap()]
    assert len(texts) == len(set(texts))
    assert "NONE" not in texts


def test_text_property_matches_function():
    for member in BatchRequestType:
        assert member.text == reqtype_to_txt(int(member))


@pytest.mark.parametrize("bad", [-1, PBS_BATCH_CEILING, PBS_BATCH_CEILING + 5])
def test_reqtype_to_txt_rejects_unknown(bad):
    with pytest.raises(ValueError):
        reqtype_to_txt(bad)


def test_reply_choices():
    assert BatchReplyChoice(1) is BatchReplyChoice.NULL
    assert BatchReplyChoice(7) is BatchReplyChoice.TEXT
    assert BatchReplyChoice(9) is BatchReplyChoice.RESC_QUERY
    assert [BatchReplyChoice(v).value for v in range(1, 10)] == list(range(1, 10))
    with pytest.raises(ValueError):
        BatchReplyChoice(0)


def test_job_files_and_options():
    assert [JobFile(v).value for v in range(5)] == list(range(5))
    assert JobFile(0) is JobFile.JSCRIPT
    assert FileOption(1) is FileOption.OFLG
    assert FileOption(2) is FileOption.EFLG
    with pytest.raises(ValueError):
        JobFile(5)