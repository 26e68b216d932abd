# cts/facade/analyzer.py
"""Высокоуровневый *facade* — единственный владелец состояния симуляции.

Класс **StabilityAnalyzer** заменяет набор глобальных переменных
(текущая банка, наполнение, ускорение, оптимум):
1. Хранит один объект ``SimulationState``; сеттеры подменяют его новым.
2. Пересчитывает оптимальное наполнение *только* при изменении банки
   (H, r, m₀, V), но не при изменении наполнения или ускорения.
3. Даёт read‑only доступ к результатам модели, тексту статуса, кривой
   устойчивости и тонким обёрткам ``plot_*``.

Результаты модели не кэшируются: ``result()`` каждый раз вызывает
чистую функцию ``compute_stability``.
"""

from __future__ import annotations

import logging

import pandas as pd

from ..constants import CURVE_STEP, DEFAULT_ACCELERATION, DEFAULT_FILL_PERCENT
from ..core.optimal_fill import find_optimal_fill
from ..core.stability import StabilityResult, compute_stability
from ..core.status import StabilityStatus, classify, status_message
from ..core.sweep import critical_acceleration_curve
from ..domain.container import ContainerSpec
from ..domain.presets import DEFAULT_PRESET, get_preset
from ..domain.state import SimulationState
from ..optimizers import AbstractFillOptimizer, OptimalFillResult
from ..visualization import plots

logger = logging.getLogger(__name__)


class StabilityAnalyzer:
    """Единая точка входа для внешних пользователей библиотеки CTS."""

    # ------------------------------------------------------------------
    # Конструктор
    # ------------------------------------------------------------------

    def __init__(
        self,
        container: ContainerSpec | str = DEFAULT_PRESET,
        fill_percent: float = DEFAULT_FILL_PERCENT,
        acceleration: float = DEFAULT_ACCELERATION,
        optimizer: str | AbstractFillOptimizer = "scan",
    ) -> None:
        if isinstance(container, str):
            spec, preset = get_preset(container), container
        else:
            spec, preset = container, None

        self.optimizer = optimizer
        self._state = SimulationState(container=spec, preset=preset)
        self._state = self._state.with_fill(fill_percent).with_acceleration(acceleration)
        self._optimal = find_optimal_fill(spec, self.optimizer)

    # ------------------------------------------------------------------
    # Состояние (только чтение)
    # ------------------------------------------------------------------

    @property
    def state(self) -> SimulationState:
        return self._state

    @property
    def container(self) -> ContainerSpec:
        return self._state.container

    @property
    def optimal(self) -> OptimalFillResult:
        """Результат последнего поиска оптимального наполнения."""
        return self._optimal

    # ------------------------------------------------------------------
    # Сеттеры
    # ------------------------------------------------------------------

    def select_container(self, preset: str) -> SimulationState:
        """Выбрать пресет: заменяются все поля геометрии и масс."""
        return self._apply(self._state.with_container(get_preset(preset), preset))

    def override_container(self, **fields) -> SimulationState:
        """Переопределить отдельные поля банки (height_mm, radius_mm, ...).

        Неверные значения отклоняются ``InvalidContainerError`` до того,
        как попадут в модель; состояние при этом не меняется.
        """
        spec = self._state.container.with_overrides(**fields)
        return self._apply(self._state.with_container(spec, self._state.preset))

    def set_fill_percent(self, fill_percent: float) -> SimulationState:
        new = self._state.with_fill(fill_percent)
        if new.fill_percent != fill_percent:
            logger.warning(
                "Fill %.2f%% is outside [0, 100]; clamped to %.2f%%",
                fill_percent,
                new.fill_percent,
            )
        return self._apply(new)

    def set_acceleration(self, acceleration: float) -> SimulationState:
        new = self._state.with_acceleration(acceleration)
        if new.acceleration != acceleration:
            logger.warning(
                "Acceleration %.2f m/s² treated as magnitude %.2f",
                acceleration,
                new.acceleration,
            )
        return self._apply(new)

    def _apply(self, new: SimulationState) -> SimulationState:
        changed = new.container_changed(self._state)
        self._state = new
        if changed:
            self._optimal = find_optimal_fill(new.container, self.optimizer)
            logger.info(
                "Container changed (%s); optimal fill = %.1f%%",
                new.container.name,
                self._optimal.best_fill_percent,
            )
        return new

    # ------------------------------------------------------------------
    # Результаты
    # ------------------------------------------------------------------

    def result(self) -> StabilityResult:
        """Пересчитать модель устойчивости для текущего состояния."""
        s = self._state
        return compute_stability(s.container, s.fill_percent, s.acceleration)

    def status(self) -> StabilityStatus:
        return classify(
            self.result(), self._state.fill_percent, self._optimal.best_fill_percent
        )

    def status_message(self) -> str:
        return status_message(
            self.result(), self._state.fill_percent, self._optimal.best_fill_percent
        )

    def curve(self, step: float = CURVE_STEP) -> pd.DataFrame:
        """Кривая a_crit(fill) для текущей банки."""
        return critical_acceleration_curve(self._state.container, step)

    def summary(self) -> pd.Series:
        """Значения информационной панели."""
        res = self.result()
        return pd.Series(
            {
                "COM height, mm": res.center_of_mass_height_mm,
                "Total mass, g": res.total_mass_g,
                "Tipping angle, °": res.tipping_angle_deg,
                "Critical acceleration, m/s²": res.critical_acceleration,
                "Stability factor": res.stability_factor,
                "Would tip": res.would_tip,
                "Optimal fill, %": self._optimal.best_fill_percent,
                "Status": self.status_message(),
            },
            name=self._state.container.name,
        )

    # ------------------------------------------------------------------
    # Быстрые обёртки для графиков
    # ------------------------------------------------------------------

    def plot_container(self, ax=None, **toggles):
        """Сцена: стол, банка, ЦМ, ребро опрокидывания, силы."""
        return plots.plot_container(self._state, self.result(), ax=ax, **toggles)

    def plot_stability_curve(self, ax=None):
        """График a_crit(fill) с отметками текущего и оптимального наполнения."""
        return plots.plot_stability_curve(
            self.curve(), self._state, self._optimal, ax=ax
        )
