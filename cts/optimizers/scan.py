# cts/optimizers/scan.py
"""Поиск оптимального наполнения полным перебором.

Целевая функция a_crit(fill) гладкая, но ЦМ – дробно‑рациональная
функция наполнения, поэтому вместо аналитики используется плотная
сетка 0, 0.5, …, 100 % (201 точка).

Правила:
* стартовые значения ``best = 0``, ``max = 0``;
* обновление только при строгом ``>`` – при равенстве остаётся первая
  (меньшая) точка;
* если все значения ≤ 0, результат – наполнение 0 %.
"""

from __future__ import annotations

import logging

from . import AbstractFillOptimizer, FillObjective, OptimalFillResult
from ..constants import FILL_STEP
from ..core.formulas import critical_acceleration
from ..core.sweep import fill_samples
from ..domain.container import ContainerSpec

logger = logging.getLogger(__name__)


class ScanOptimizer(AbstractFillOptimizer):
    """Перебор наполнения по равномерной сетке."""

    def __init__(
        self,
        step: float = FILL_STEP,
        objective: FillObjective = critical_acceleration,
    ) -> None:
        self.step = step
        self.objective = objective

    def find_optimal_fill(self, container: ContainerSpec) -> OptimalFillResult:
        best_fill = 0.0
        max_accel = 0.0
        for fill in fill_samples(self.step):
            accel = self.objective(container, float(fill))
            if accel > max_accel:
                max_accel = accel
                best_fill = float(fill)

        logger.debug(
            "scan %s: best fill=%.1f%% a_crit=%.3f",
            container.name,
            best_fill,
            max_accel,
        )
        return OptimalFillResult(best_fill, max_accel)
