"""Tests for core/depth_guard.py.

Python 3.13+.
"""

from __future__ import annotations

import sys

import pytest

from intllint.core.depth_guard import DepthGuard, depth_clamp
from intllint.diagnostics import DepthLimitExceededError, DiagnosticCode


class TestDepthGuard:
    """Enter/exit bookkeeping and the limit check."""

    def test_tracks_depth(self) -> None:
        guard = DepthGuard(max_depth=3)
        with guard:
            assert guard.depth == 1
            with guard:
                assert guard.depth == 2
        assert guard.depth == 0

    def test_limit_exceeded(self) -> None:
        guard = DepthGuard(max_depth=2)
        with guard, guard, pytest.raises(DepthLimitExceededError) as exc_info, guard:
            pass
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.ICU_NESTING_DEPTH_EXCEEDED

    def test_failed_enter_does_not_leak_depth(self) -> None:
        guard = DepthGuard(max_depth=1)
        with guard:
            with pytest.raises(DepthLimitExceededError):
                guard.__enter__()
            assert guard.depth == 1
        assert guard.depth == 0

    def test_exit_on_exception(self) -> None:
        guard = DepthGuard(max_depth=5)
        with pytest.raises(RuntimeError), guard:
            raise RuntimeError
        assert guard.depth == 0


class TestDepthClamp:
    def test_within_limit(self) -> None:
        assert depth_clamp(10) == 10

    def test_clamped(self) -> None:
        limit = sys.getrecursionlimit()
        assert depth_clamp(limit * 2) == limit - 50

    def test_guard_clamps_max_depth(self) -> None:
        guard = DepthGuard(max_depth=sys.getrecursionlimit() * 2)
        assert guard.max_depth < sys.getrecursionlimit()
