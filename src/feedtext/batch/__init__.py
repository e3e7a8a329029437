"""Batch parsing APIs.

The Qt worker lives in :mod:`feedtext.batch.qt_bridge` and is imported
explicitly; it needs the ``qt`` extra.
"""

from feedtext.batch.models import BatchEntry, BatchReport
from feedtext.batch.service import BatchCancelled, FeedEventBatchParser
from feedtext.batch.settings import BatchSettings

__all__ = [
    "BatchCancelled",
    "BatchEntry",
    "BatchReport",
    "BatchSettings",
    "FeedEventBatchParser",
]
