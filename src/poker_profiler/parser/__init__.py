"""Loaders for already-parsed hands."""

from poker_profiler.parser.hand_loader import HandLoader, HandFormatError

__all__ = ["HandLoader", "HandFormatError"]
