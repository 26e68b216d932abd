# cts/__init__.py
"""Пакет **CTS** (Can Tipping Stability).

Квазистатическая модель опрокидывания банки с напитком при
горизонтальном ускорении (торможение/разгон транспорта) в зависимости
от наполнения.

Инициализационный модуль упрощает импорт ключевых сущностей:

--- from cts import StabilityAnalyzer, ContainerSpec, compute_stability ---

Экспортируемые объекты перечислены в ``__all__`` — это *public API*
пакета.
"""

from __future__ import annotations

from .facade.analyzer import StabilityAnalyzer
from .domain.container import ContainerSpec, InvalidContainerError
from .domain.presets import PRESETS, get_preset
from .domain.state import SimulationState
from .core.stability import StabilityResult, compute_stability
from .core.optimal_fill import find_optimal_fill
from .optimizers import OptimalFillResult

__all__ = [
    "StabilityAnalyzer",      # контроллер состояния + графики
    "ContainerSpec",          # геометрия и массы банки
    "InvalidContainerError",  # ошибка валидации входов
    "PRESETS",                # Red Bull, Monster, Coca-Cola
    "get_preset",
    "SimulationState",        # наполнение, ускорение, банка
    "StabilityResult",
    "compute_stability",      # модель устойчивости
    "OptimalFillResult",
    "find_optimal_fill",      # поиск оптимального наполнения
]
