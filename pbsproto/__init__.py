"""Batch-system protocol constants, error codes, attribute names and cluster metric helpers."""

__version__ = "0.1.0"

__all__ = ["attrnames", "batchreq", "dis", "events", "ifl", "metric", "network"]