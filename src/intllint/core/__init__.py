"""Core infrastructure shared by the ICU parser and validators."""

from .depth_guard import DepthGuard, depth_clamp

__all__ = ["DepthGuard", "depth_clamp"]
