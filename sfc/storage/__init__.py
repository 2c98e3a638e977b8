"""Record storage for feedback."""

from sfc.storage.base import RecordStore, write_with_retry
from sfc.storage.json_store import JsonFeedbackStore
from sfc.storage.memory_store import InMemoryFeedbackStore

__all__ = [
    "InMemoryFeedbackStore",
    "JsonFeedbackStore",
    "RecordStore",
    "write_with_retry",
]
