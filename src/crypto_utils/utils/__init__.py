"""Utility helpers."""

from .clock import Clock, fixed_clock, unix_seconds, utc_now

__all__ = ["Clock", "fixed_clock", "unix_seconds", "utc_now"]
