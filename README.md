# pbsproto

Building blocks for tools that work with a PBS-style batch server: request
and reply codes, wire-format error codes, attribute names, logging event
masks, connection bookkeeping, and helpers for the `name=value;...` cluster
metric strings that nodes report.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `pbsproto.metric`
  - `store_cluster_attr(metric, name, value)` returns a new metric string in
    which `name=value` is appended at the end; an existing `name=` entry is
    cut out first (the `;` that followed it stays, so the result may contain
    empty fields).
  - `retrieve_cluster_attr(metric, name)` returns the text after the first
    `name=` up to the next `;`, `:` or newline, or `None` if it is absent.
  - `bootable_alternatives(host_lines, image_lines, hostname)` returns the
    `RepositoryAlternative` records a host may boot, with property lists
    taken from the image lines (the last matching line wins).
  - `alternative_properties(image_lines, name)` returns the property list of
    the first matching image line, or `None`.
  - `is_user_in_group(group_lines, group, user)` checks that a user appears
    as a whole name (separated by spaces, commas or tabs) in a group line.
  - `ConfigLine` is a parsed configuration line (`key`, `first`, `second`);
    `RepositoryAlternative` has `name`, `proplist`, `mark` and
    `has_property(prop)`; `CheckResult` enumerates check outcomes.
- `pbsproto.dis`: `DisError`, the enumeration of data-is-strings result
  codes; `dis_message(code)` gives the text for a code (ValueError for an
  unknown one); `DisProtocolError(code)` is an exception carrying the code
  as `.code`. `THE_BUF_SIZE` is the largest send buffer.
- `pbsproto.batchreq`: `BatchRequestType` (with `is_gap()` for retired
  slots and the `text` property), `reqtype_to_txt(reqtype)`,
  `BatchReplyChoice`, `JobFile`, `FileOption`, and constants such as
  `PBS_BATCH_CEILING` and `SCRIPT_CHUNK_Z`.
- `pbsproto.ifl`: `Attribute` (name, value, resource, op, and the `key`
  property joining name and resource with `.`), `BatchStatus` (with
  `find(name, resource)` and `as_dict()`), `BatchOp`, `ManagerCommand`,
  `ManagerObject`, `ShutdownManner`, `MessageFile`, and the size limits
  (`PBS_MAXSVRJOBID`, `PBS_MAXDEST`, ...).
- `pbsproto.events`: `EventType` flags, `EventClass`, `Severity`, and
  `should_log(event, mask)`, which is true when the event is in the mask or
  carries `EventType.FORCE`.
- `pbsproto.attrnames`: attribute name and value constants (`ATTR_*`,
  `ND_*`, `Q_DT_*`), `default_ports(torque_ports)` returning `ServicePorts`,
  and `site_job_attributes()` returning `SiteJobAttribute` records with
  `AttributeAccess` permissions and `allows(access)`.
- `pbsproto.network`: `Connection` (with `is_idle(now)` and `touch(now)`),
  `Listener`, `ConnType`, `Protocol`, `InterServerMessage`,
  `ConnectionFlag`, `SocketType`, `MoveType`, `RecoveryMode`, server limits
  and paths, and `next_sequence_number(current)`, which wraps to zero after
  `PBS_SEQNUMTOP`.

## Example

```python
from pbsproto.metric import store_cluster_attr, retrieve_cluster_attr

metric = store_cluster_attr(None, "cpu", "8")
metric = store_cluster_attr(metric, "mem", "16gb")
print(metric)                                # cpu=8;mem=16gb
metric = store_cluster_attr(metric, "cpu", "16")
print(metric)                                # ;mem=16gb;cpu=16
print(retrieve_cluster_attr(metric, "cpu"))  # 16
```

```python
from pbsproto.batchreq import BatchRequestType, reqtype_to_txt

print(reqtype_to_txt(BatchRequestType.QUEUE_JOB))  # QueueJob
print(reqtype_to_txt(35))                          # NONE
```

## What it does not do

The package holds definitions and small helpers only. It does not open
connections to a batch server, encode or decode data-is-strings messages,
read configuration files from disk (the repository and group helpers take
lines that are already parsed), or provide any command-line program.