"""Unified exception hierarchy for shelltimers.

All library exceptions inherit from ShellTimersException, enabling unified
error handling across modules.

Categories:
- InfrastructureException: failures of the host facilities a delay relies on
- SleepProcessException: the blocking ``sleep`` process misbehaved
- RetryExhaustedException: a bounded retry loop gave up
"""

from __future__ import annotations


# =============================================================================
# Base Exception
# =============================================================================


class ShellTimersException(Exception):
    """Base exception for all shelltimers errors.

    Carries an optional error code and context dict for structured error data.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "CANCEL_RETRY_EXHAUSTED").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Infrastructure Exceptions
# =============================================================================


class InfrastructureException(ShellTimersException):
    """Failures of host facilities: processes, the event loop, the filesystem."""


class SleepProcessException(InfrastructureException):
    """The blocking sleep process could not be run to completion."""


class SleepInterruptedError(SleepProcessException):
    """The sleep process exited abnormally (killed by a signal or non-zero status).

    Handed to process exit callbacks as the error value. Never raised to callers.
    """

    def __init__(self, returncode: int | None) -> None:
        super().__init__(
            f"sleep process exited with status {returncode}",
            code="SLEEP_INTERRUPTED",
            context={"returncode": returncode},
        )
        self.returncode = returncode


class RetryExhaustedException(InfrastructureException):
    """All retry attempts have been exhausted without success."""


class CancellationFailedException(RetryExhaustedException):
    """A delay could not be terminated within the configured number of attempts."""
