"""Batch processing settings."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from feedtext.core.breakpoints import DEFAULT_BREAKPOINTS, BreakpointTable


@dataclass
class BatchSettings:
    """All caller-configurable batch options."""

    # Eras
    breakpoints: BreakpointTable = field(default_factory=lambda: DEFAULT_BREAKPOINTS)

    # Diagnostics
    log_failures: bool = True
    failure_log_level: int = logging.WARNING

    # Re-render every parsed event and compare with its original text
    verify_round_trip: bool = False
