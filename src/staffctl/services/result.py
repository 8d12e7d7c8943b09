"""ServiceResult and ServiceError: the service contract.

INVARIANT: All DirectoryService operations return ServiceResult.
Commands format it for humans or emit it as JSON with ``--json``. Failures
carry a stable ``code``: ``INVALID_CURRENCY``, ``INVALID_EMPLOYEE`` or
``NOT_FOUND``.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for directory operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"add_employee"``).
        data: Operation-specific payload on success.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    error: ServiceError | None = None

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        """Build a failed result; extra keyword arguments become ``error.detail``.

        Logged at INFO, so only visible with ``--verbose``.
        """
        logger.info("%s failed: %s", op, code)
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )
