# cts/core/status.py
"""Текст статуса для пользователя.

Приоритет сообщений:
1. банка опрокидывается (TIPPING);
2. наполнение в пределах ±NEAR_OPTIMAL_TOLERANCE от оптимума (NEAR_OPTIMAL);
3. иначе – подсказка, сколько долить/отлить (ADJUST).
"""

from __future__ import annotations

from enum import Enum, auto

from .stability import StabilityResult
from ..constants import NEAR_OPTIMAL_TOLERANCE


class StabilityStatus(Enum):
    TIPPING = auto()
    NEAR_OPTIMAL = auto()
    ADJUST = auto()


def classify(
    result: StabilityResult, fill_percent: float, best_fill_percent: float
) -> StabilityStatus:
    if result.would_tip:
        return StabilityStatus.TIPPING
    if abs(fill_percent - best_fill_percent) < NEAR_OPTIMAL_TOLERANCE:
        return StabilityStatus.NEAR_OPTIMAL
    return StabilityStatus.ADJUST


def status_message(
    result: StabilityResult, fill_percent: float, best_fill_percent: float
) -> str:
    """Сообщение для информационной панели."""
    status = classify(result, fill_percent, best_fill_percent)
    if status is StabilityStatus.TIPPING:
        return "CAN WOULD TIP OVER! Reduce force or adjust fill level."
    if status is StabilityStatus.NEAR_OPTIMAL:
        return (
            "Near optimal stability! "
            "This fill level maximizes resistance to tipping."
        )
    direction = "add" if fill_percent < best_fill_percent else "remove"
    amount = abs(fill_percent - best_fill_percent)
    return (
        f"For maximum stability, {direction} {amount:.1f}% of liquid "
        f"to reach {best_fill_percent:.1f}% fill level."
    )
