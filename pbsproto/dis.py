"""Error codes of the Data-is-Strings wire encoding."""

from __future__ import annotations

from enum import IntEnum

__all__ = ["DisError", "DisProtocolError", "dis_message", "THE_BUF_SIZE"]

THE_BUF_SIZE = 262144
"""Largest TCP send buffer; it must hold all attributes of a job."""


class DisError(IntEnum):
    """Result codes reported by Data-is-Strings reads and writes."""

    SUCCESS = 0
    OVERFLOW = 1
    HUGEVAL = 2
    BADSIGN = 3
    LEADZRO = 4
    NONDIGIT = 5
    NULLSTR = 6
    EOD = 7
    NOMALLOC = 8
    PROTO = 9
    NOCOMMIT = 10
    EOF = 11


_MESSAGES = {
    DisError.SUCCESS: "No error",
    DisError.OVERFLOW: "Value too large to convert",
    DisError.HUGEVAL: "Tried to write floating point infinity",
    DisError.BADSIGN: "Negative sign on an unsigned datum",
    DisError.LEADZRO: "Input count or value has leading zero",
    DisError.NONDIGIT: "Non-digit found where a digit was expected",
    DisError.NULLSTR: "String read has an embedded ASCII NUL",
    DisError.EOD: "Premature end of message",
    DisError.NOMALLOC: "Unable to malloc space for string",
    DisError.PROTO: "Supporting protocol failure",
    DisError.NOCOMMIT: "Protocol failure in commit",
    DisError.EOF: "End of File",
}


def dis_message(code: int) -> str:
    """Return the description of a DIS result code.

    Raises ValueError if *code* is not a known result code.
    """
    try:
        error = DisError(code)
    except ValueError:
        raise ValueError(f"unknown DIS result code: {code!r}") from None
    return _MESSAGES[error]


class DisProtocolError(Exception):
    """A Data-is-Strings read or write failed with a result code."""

    def __init__(self, code: int) -> None:
        message = dis_message(code)
        self.code = DisError(code)
        super().__init__(message)