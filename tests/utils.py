# tests/utils.py
from __future__ import annotations

from typing import Any, Dict, List

import pyarrow as pa


def make_batch(schema: pa.Schema, data: Dict[str, List[Any]]) -> pa.RecordBatch:
    """Build a RecordBatch from column lists, typed by `schema`."""
    return pa.RecordBatch.from_pydict(data, schema=schema)


def csv_lines(text: str) -> List[str]:
    """Split csv output into lines (csv module terminates rows with \\r\\n)."""
    return text.split("\r\n")[:-1] if text else []


class RecordingStream:
    """Text stream double that records every write and flush."""

    def __init__(self):
        self.writes: List[str] = []
        self.flushes = 0
        self.closed = False

    def write(self, s: str) -> int:
        self.writes.append(s)
        return len(s)

    def flush(self) -> None:
        self.flushes += 1

    def getvalue(self) -> str:
        return "".join(self.writes)


class FailingStream:
    """Text stream whose writes always fail."""

    def __init__(self, exc: BaseException):
        self.exc = exc

    def write(self, s: str) -> int:
        raise self.exc
