"""Showdown hand evaluation."""

from poker_profiler.evaluation.evaluator import (
    HandRank, RANK_COUNT, HandEvaluator, OmahaEvaluator, evaluator_for
)

__all__ = ["HandRank", "RANK_COUNT", "HandEvaluator", "OmahaEvaluator", "evaluator_for"]
