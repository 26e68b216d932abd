"""Базовые абстракции и фабрика стратегий поиска оптимального наполнения.

*Модуль объединяет:*
1. **OptimalFillResult** — результат поиска (лучшее наполнение и
   достигнутое критическое ускорение).
2. **AbstractFillOptimizer** — абстрактный базовый класс (ABC), определяющий
   единый интерфейс ``find_optimal_fill`` для всех стратегий.
3. **FillObjective** — протокол целевой функции ``(container, fill) -> a``;
   позволяет подменять физику в тестах.
4. Функцию‑фабрику **get(name)**, возвращающую стратегию по строковому
   алиасу ("scan", "pyomo").
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Protocol

from ..domain.container import ContainerSpec

# ---------------------------------------------------------------------------
# Результат и целевая функция
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class OptimalFillResult:
    best_fill_percent: float          # наполнение, %
    max_critical_acceleration: float  # a_crit в этой точке, м/с²


class FillObjective(Protocol):
    """Any callable ``(container, fill_percent) -> float`` qualifies."""

    def __call__(self, container: ContainerSpec, fill_percent: float) -> float:
        ...


# ---------------------------------------------------------------------------
# Абстрактный базовый класс стратегий
# ---------------------------------------------------------------------------


class AbstractFillOptimizer(ABC):
    """Интерфейс любой стратегии поиска наполнения с максимумом a_crit."""

    @abstractmethod
    def find_optimal_fill(self, container: ContainerSpec) -> OptimalFillResult:
        """Вернуть наполнение в диапазоне [0, 100] %."""
        ...


# ---------------------------------------------------------------------------
# Фабрика по строковому имени
# ---------------------------------------------------------------------------


def get(name: str = "scan") -> AbstractFillOptimizer:
    """Вернуть готовый объект‑оптимизатор по алиасу *name*.

    Parameters
    ----------
    name : str
        * ``"scan"``  – ScanOptimizer (перебор с шагом 0.5 %),
        * ``"pyomo"`` – PyomoFillOptimizer (непрерывная NLP‑модель).

    Raises
    ------
    ValueError
        Если передано неизвестное имя оптимизатора.
    """
    if name == "scan":
        from .scan import ScanOptimizer

        return ScanOptimizer()
    if name == "pyomo":
        from .pyomo_optimizer import PyomoFillOptimizer

        return PyomoFillOptimizer()

    raise ValueError(f"Unknown optimizer '{name}'")
