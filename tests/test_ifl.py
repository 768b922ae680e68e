import dataclasses

import pytest

from pbsproto.batchreq import FileOption
from pbsproto.ifl import (
    Attribute,
    BatchOp,
    BatchStatus,
    ManagerCommand,
    ManagerObject,
    MessageFile,
    ShutdownManner,
)


@pytest.fixture
def status():
    return BatchStatus(
        name="42.server",
        attribs=[
            Attribute("Job_Name", "sim"),
            Attribute("Resource_List", "4", resource="nodes"),
            Attribute("Resource_List", "01:00:00", resource="walltime"),
        ],
    )


def test_find_plain_attribute(status):
    found = status.find("Job_Name")
    assert found is not None
    assert found.value == "sim"


def test_find_distinguishes_resources(status):
    nodes = status.find("Resource_List", "nodes")
    walltime = status.find("Resource_List", "walltime")
    assert nodes.value == "4"
    assert walltime.value == "01:00:00"


def test_find_without_resource_misses_qualified_entry(status):
    assert status.find("Resource_List") is None


def test_find_missing_returns_none(status):
    assert status.find("queue") is None


def test_as_dict_joins_resource(status):
    assert status.as_dict() == {
        "Job_Name": "sim",
        "Resource_List.nodes": "4",
        "Resource_List.walltime": "01:00:00",
    }


def test_as_dict_later_entry_wins():
    st = BatchStatus("q", [Attribute("comment", "a"), Attribute("comment", "b")])
    assert st.as_dict() == {"comment": "b"}


def test_empty_status_has_no_attributes():
    st = BatchStatus("server")
    assert st.as_dict() == {}
    assert st.text is None


def test_attribute_defaults_to_set():
    attr = Attribute("Priority", "10")
    assert attr.op is BatchOp.SET
    assert attr.resource is None


def test_attribute_is_frozen():
    attr = Attribute("Priority", "10")
    with pytest.raises(dataclasses.FrozenInstanceError):
        attr.value = "20"
    assert attr.value == "10"


def test_batch_op_order():
    assert [BatchOp(i).name for i in range(12)] == [
        "SET", "UNSET", "INCR", "DECR", "EQ", "NE",
        "GE", "GT", "LE", "LT", "DFLT", "MERGE",
    ]


def test_manager_command_order():
    assert [ManagerCommand(i).name for i in range(7)] == [
        "CREATE", "DELETE", "SET", "UNSET", "LIST", "PRINT", "ACTIVE",
    ]


def test_manager_object_none_is_below_server():
    assert [ManagerObject(i).name for i in range(-1, 4)] == [
        "NONE", "SERVER", "QUEUE", "JOB", "NODE",
    ]


def test_shutdown_manner_order():
    assert [ShutdownManner(i).name for i in range(-1, 3)] == [
        "SIG", "IMMEDIATE", "DELAY", "QUICK",
    ]


def test_message_file_matches_file_options():
    assert MessageFile(int(FileOption.OFLG)) is MessageFile.OUT
    assert MessageFile(int(FileOption.EFLG)) is MessageFile.ERR


def test_unknown_batch_op_rejected():
    with pytest.raises(ValueError):
        BatchOp(len(BatchOp))