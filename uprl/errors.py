#===============================================================================
#  UpRL | errors.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Exception types. Each pipeline stage raises its own failure; the batch
#  processor catches UpRLError at the per-file boundary.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations


class UpRLError(Exception):
    """Base error for the project."""

    kind = "error"


class ParseFailure(UpRLError):
    """No extractable URL (or the shortcut could not be read)."""

    kind = "parse_failure"


class FetchFailure(UpRLError):
    """Network, malformed-URL or missing-title error while resolving a title."""

    kind = "fetch_failure"


class RenameFailure(UpRLError):
    """Filesystem error during backup or write, or a degenerate filename."""

    kind = "rename_failure"


class BatchBusyError(RuntimeError):
    """A batch is already running on this processor."""
