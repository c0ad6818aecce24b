"""Record stores: the engine's only I/O boundary."""

from .base import Record, RecordStore
from .memory import InMemoryRecordStore
from .sql import SqlRecordStore

__all__ = ["InMemoryRecordStore", "Record", "RecordStore", "SqlRecordStore"]
