# cts/domain/state.py
"""Текущее состояние симуляции.

Вместо набора глобальных переменных (выбранная банка, наполнение,
ускорение) всё хранится в одном неизменяемом объекте
**SimulationState**. Сеттеры ``with_*`` возвращают *новое* состояние;
владеет им единственный контроллер (см. ``facade.analyzer``).
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from .container import ContainerSpec
from ..constants import DEFAULT_ACCELERATION, DEFAULT_FILL_PERCENT


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


@dataclass(frozen=True, slots=True)
class SimulationState:
    """Входы модели устойчивости."""

    container: ContainerSpec
    fill_percent: float = DEFAULT_FILL_PERCENT   # наполнение, %
    acceleration: float = DEFAULT_ACCELERATION   # горизонтальное ускорение, м/с²
    preset: Optional[str] = None                 # ключ пресета, None – своя банка

    def with_fill(self, fill_percent: float) -> "SimulationState":
        """Новое состояние с наполнением, обрезанным до [0, 100]."""
        return replace(self, fill_percent=clamp(float(fill_percent), 0.0, 100.0))

    def with_acceleration(self, acceleration: float) -> "SimulationState":
        """Новое состояние; знак отбрасывается (торможение ≡ разгон)."""
        return replace(self, acceleration=abs(float(acceleration)))

    def with_container(
        self, container: ContainerSpec, preset: Optional[str] = None
    ) -> "SimulationState":
        return replace(self, container=container, preset=preset)

    def container_changed(self, other: "SimulationState") -> bool:
        """Изменились ли параметры поиска оптимального наполнения."""
        return not self.container.same_physics(other.container)
