# tests/conftest.py
import io

import pyarrow as pa
import pytest

from utils import RecordingStream


@pytest.fixture()
def out():
    """In-memory text stream the writer can target."""
    return io.StringIO()


@pytest.fixture()
def recording_stream():
    return RecordingStream()


@pytest.fixture()
def ab_schema() -> pa.Schema:
    """[("a", int32), ("b", string)]"""
    return pa.schema([("a", pa.int32()), ("b", pa.string())])


@pytest.fixture()
def all_types_schema() -> pa.Schema:
    """One field per supported primitive type."""
    return pa.schema([
        ("b", pa.bool_()),
        ("i8", pa.int8()),
        ("i16", pa.int16()),
        ("i32", pa.int32()),
        ("i64", pa.int64()),
        ("u8", pa.uint8()),
        ("u16", pa.uint16()),
        ("u32", pa.uint32()),
        ("u64", pa.uint64()),
        ("f32", pa.float32()),
        ("f64", pa.float64()),
        ("s", pa.string()),
    ])
