"""Depth limiting for recursion protection.

The grammar combinators recurse once per nested array/object. DepthGuard
bounds that recursion so deeply nested input fails cleanly instead of
raising RecursionError from the middle of the parser.

Thread-safe: uses explicit state, no thread-local storage.
Python 3.13+.
"""

from __future__ import annotations

import inspect
import logging
import sys
from dataclasses import dataclass, field

from jsonwalk.constants import FRAMES_PER_NESTING_LEVEL, MAX_DEPTH, STACK_RESERVE_FRAMES
from jsonwalk.diagnostics import JsonWalkError
from jsonwalk.diagnostics.templates import ErrorTemplate

__all__ = ["DepthGuard", "DepthLimitExceededError", "depth_clamp"]

logger = logging.getLogger(__name__)


class DepthLimitExceededError(JsonWalkError):
    """Raised when maximum nesting depth is exceeded.

    The grammar catches this at the structured production that tripped the
    limit and turns it into an ordinary match failure; callers of the
    combinators only ever see None.
    """


@dataclass(slots=True)
class DepthGuard:
    """Context manager for tracking and limiting recursion depth.

    Usage in the grammar:
        guard = DepthGuard(max_depth=64)
        with guard:
            # Recursive descent into one array/object
            result = _array_body(cursor, context)

    Mutability Note:
        Intentionally mutable (not frozen=True) to enable stateful depth
        tracking via context manager protocol. The current_depth field is
        incremented/decremented on __enter__/__exit__.

    Thread Safety:
        Uses explicit instance state, fully reentrant.
        Each call stack maintains its own DepthGuard instance.

    Attributes:
        max_depth: Maximum allowed depth (default: MAX_DEPTH)
        current_depth: Current recursion depth
    """

    max_depth: int = MAX_DEPTH
    current_depth: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        """Clamp max_depth against the stack frames still free here."""
        self.max_depth = depth_clamp(self.max_depth)

    def __enter__(self) -> DepthGuard:
        """Enter guarded section, increment depth.

        Validates depth limit BEFORE incrementing to prevent state corruption
        if DepthLimitExceededError is raised. Since __exit__ is not called when
        __enter__ raises, incrementing first would leave current_depth permanently
        elevated, causing all subsequent operations to fail.
        """
        self.check()
        self.current_depth += 1
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Exit guarded section, decrement depth."""
        self.current_depth -= 1

    def is_exceeded(self) -> bool:
        """Check if depth limit has been reached."""
        return self.current_depth >= self.max_depth

    def check(self) -> None:
        """Explicitly check depth and raise if exceeded.

        Raises:
            DepthLimitExceededError: If depth limit exceeded
        """
        if self.is_exceeded():
            raise DepthLimitExceededError(
                ErrorTemplate.nesting_depth_exceeded(self.max_depth)
            )


def _stack_depth() -> int:
    """Count the Python frames on the calling thread's stack."""
    depth = 0
    frame = inspect.currentframe()
    while frame is not None:
        depth += 1
        frame = frame.f_back
    return depth


def depth_clamp(
    requested_depth: int,
    frames_per_level: int = FRAMES_PER_NESTING_LEVEL,
    reserve_frames: int = STACK_RESERVE_FRAMES,
) -> int:
    """Clamp requested depth against the remaining stack budget.

    The budget is the recursion limit minus the frames already on the
    stack at the call, minus ``reserve_frames``. Each nesting level of
    the grammar costs ``frames_per_level`` frames of it. Logs a warning
    if clamping occurs.

    Because the budget is measured here, a guard must be built no
    shallower than the parse it protects; ParseContext builds its guard
    next to the top-level call.

    Args:
        requested_depth: Desired maximum nesting depth
        frames_per_level: Stack frames consumed per nesting level
        reserve_frames: Stack frames kept free below the deepest level

    Returns:
        Safe depth value, clamped if necessary (never below 1)

    Example:
        >>> depth_clamp(100)  # fits at the default recursion limit
        100
        >>> depth_clamp(10_000) < 250  # clamped near (1000 - 100) // 4
        True
    """
    limit = sys.getrecursionlimit()
    in_use = _stack_depth()
    max_safe_depth = max(1, (limit - in_use - reserve_frames) // frames_per_level)
    if requested_depth > max_safe_depth:
        logger.warning(
            "Requested depth %d exceeds the stack budget (recursion limit %d, "
            "%d frames in use). Clamping to %d to prevent RecursionError. "
            "Consider increasing sys.setrecursionlimit() if needed.",
            requested_depth,
            limit,
            in_use,
            max_safe_depth,
        )
        return max_safe_depth
    return requested_depth
