"""Cluster metric strings, image repository lookups and group membership.

A cluster metric is a ``;`` separated list of ``name=value`` pairs.  The
repository and group helpers work on already parsed configuration lines,
each a :class:`ConfigLine` holding a key and up to two values.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable

__all__ = [
    "CheckResult",
    "ConfigLine",
    "RepositoryAlternative",
    "store_cluster_attr",
    "retrieve_cluster_attr",
    "bootable_alternatives",
    "alternative_properties",
    "is_user_in_group",
]

_VALUE_TERMINATORS = ";:\n"
_NAME_BEFORE = " ,\t"
_NAME_AFTER = "\t\n ,"


class CheckResult(IntEnum):
    """Outcome of an account or data check."""

    NO = 0
    OK = 1
    USER = 2
    DATA = 3


@dataclass(frozen=True)
class ConfigLine:
    """One parsed configuration line: a key with its first and second values."""

    key: str
    first: str
    second: str | None = None


@dataclass
class RepositoryAlternative:
    """A bootable image that a host may run, with its property list."""

    name: str
    proplist: str | None = None
    mark: int = 1

    def has_property(self, prop: str) -> bool:
        """Return True if *prop* is one of the comma separated properties."""
        if not self.proplist:
            return False
        return prop in (p.strip() for p in self.proplist.split(","))


def store_cluster_attr(metric: str | None, name: str, value: str) -> str:
    """Return *metric* with attribute *name* set to *value*.

    An existing ``name=`` entry is removed and the new pair is appended at
    the end, separated from what remains by ``;``.
    """
    pattern = f"{name}="
    remaining = metric
    if metric is not None:
        pos = metric.find(pattern)
        if pos >= 0:
            sep = metric.find(";", pos)
            rest = metric[sep:] if sep >= 0 else ""
            remaining = metric[:pos] + rest
    prefix = f"{remaining};" if remaining is not None else ""
    return f"{prefix}{name}={value}"


def retrieve_cluster_attr(metric: str | None, name: str) -> str | None:
    """Return the value of attribute *name* in *metric*, or None if absent.

    The value runs up to the next ``;``, ``:`` or newline.
    """
    if metric is None:
        return None
    pos = metric.find(f"{name}=")
    if pos < 0:
        return None
    end = pos
    while end < len(metric) and metric[end] not in _VALUE_TERMINATORS:
        end += 1
    start = pos + len(name) + 1
    return metric[start:end] if end > start else ""


def bootable_alternatives(
    host_lines: Iterable[ConfigLine],
    image_lines: Iterable[ConfigLine],
    hostname: str,
) -> list[RepositoryAlternative]:
    """List the images *hostname* can boot, with properties from *image_lines*.

    When an image is described more than once, the last description wins.
    """
    alternatives = [
        RepositoryAlternative(name=line.first)
        for line in host_lines
        if line.key == hostname
    ]
    images = list(image_lines)
    for alternative in alternatives:
        for line in images:
            if line.key == alternative.name:
                alternative.proplist = line.first
    return alternatives


def alternative_properties(image_lines: Iterable[ConfigLine], name: str) -> str | None:
    """Return the property list of image *name*, or None if it is unknown."""
    return next((line.first for line in image_lines if line.key == name), None)


def is_user_in_group(group_lines: Iterable[ConfigLine], group: str, user: str) -> bool:
    """Return True if *user* is listed as a whole name in *group*.

    Member lists are separated by spaces, commas or tabs.  Only the first
    occurrence of *user* in each matching line is considered.
    """
    for line in group_lines:
        if line.key != group:
            continue
        members = line.first
        start = members.find(user)
        if start < 0:
            continue
        if start > 0 and members[start - 1] not in _NAME_BEFORE:
            continue
        end = start + len(user)
        if end < len(members) and members[end] not in _NAME_AFTER:
            continue
        return True
    return False