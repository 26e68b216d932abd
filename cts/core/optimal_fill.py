# cts/core/optimal_fill.py

from __future__ import annotations

from ..domain.container import ContainerSpec
from ..optimizers import AbstractFillOptimizer, OptimalFillResult, get as get_optimizer


def find_optimal_fill(
    container: ContainerSpec,
    optimizer: str | AbstractFillOptimizer = "scan",
) -> OptimalFillResult:
    """Наполнение (%), при котором критическое ускорение максимально.

    Зависит только от геометрии и масс банки, но не от текущего
    наполнения и не от приложенного ускорения.
    """
    strategy = get_optimizer(optimizer) if isinstance(optimizer, str) else optimizer
    return strategy.find_optimal_fill(container)
