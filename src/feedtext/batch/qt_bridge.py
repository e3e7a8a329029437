"""Qt bridge to run batch parsing in a worker thread."""

from __future__ import annotations

import threading

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from feedtext.batch.service import BatchCancelled, FeedEventBatchParser
from feedtext.batch.settings import BatchSettings
from feedtext.core.breakpoints import DEFAULT_BREAKPOINTS, BreakpointTable
from feedtext.core.models import FeedEvent


class FeedParseWorker(QObject):
    """Thread-affine worker that parses feed event batches on demand."""

    batch_ready = pyqtSignal(int, object)
    batch_cancelled = pyqtSignal(int)
    batch_error = pyqtSignal(int, str)
    progress = pyqtSignal(int, int, int)

    __slots__ = ("_cancel_event", "_parser")

    def __init__(
        self,
        *,
        breakpoints: BreakpointTable = DEFAULT_BREAKPOINTS,
        log_failures: bool = True,
        verify_round_trip: bool = False,
    ) -> None:
        super().__init__()
        self._parser = FeedEventBatchParser(
            BatchSettings(
                breakpoints=breakpoints,
                log_failures=log_failures,
                verify_round_trip=verify_round_trip,
            )
        )
        self._cancel_event = threading.Event()

    @pyqtSlot(object, int)
    def request_batch(self, events_obj: object, request_id: int) -> None:
        """Parse the feed events in *events_obj* and emit the report."""
        if not isinstance(events_obj, (list, tuple)) or not all(
            isinstance(event, FeedEvent) for event in events_obj
        ):
            self.batch_error.emit(request_id, "Worker received invalid feed events")
            return

        self._cancel_event.clear()
        try:
            report = self._parser.parse_batch(
                events_obj,
                is_cancelled=self._cancel_event.is_set,
                on_progress=lambda done, total: self.progress.emit(
                    request_id, done, total
                ),
            )
        except BatchCancelled:
            self.batch_cancelled.emit(request_id)
            return
        except Exception as exc:
            self.batch_error.emit(request_id, str(exc))
            return

        self.batch_ready.emit(request_id, report)

    @pyqtSlot()
    def cancel(self) -> None:
        """Request cancellation of the current batch."""
        self._cancel_event.set()

    @pyqtSlot(bool, bool)
    def set_options(self, log_failures: bool, verify_round_trip: bool) -> None:
        """Update diagnostics options (takes effect on the next batch)."""
        settings = self._parser.settings
        self._parser = FeedEventBatchParser(
            BatchSettings(
                breakpoints=settings.breakpoints,
                log_failures=log_failures,
                verify_round_trip=verify_round_trip,
                failure_log_level=settings.failure_log_level,
            )
        )
