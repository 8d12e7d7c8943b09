"""JSON and status-line helpers for ServiceResult.

Human rendering of records lives in :mod:`staffctl.output.renderers`;
this module covers ``--json`` output and error lines.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from staffctl.services.result import ServiceResult


def format_json(result: ServiceResult) -> str:
    return result.model_dump_json(indent=2)


def format_error(result: ServiceResult) -> str:
    """One-line error message for a failed result."""
    return result.error.message if result.error else f"{result.op} failed"
