# cts/core/stability.py
"""Модель устойчивости банки при горизонтальном ускорении.

Квазистатика: банка – твёрдое тело на плоскости с бесконечным трением.
Банка опрокидывается вокруг ребра основания (*pivot*), когда
равнодействующая силы тяжести и силы инерции выходит за ребро, т.е. при
``a ≥ a_crit = g · r / h_цм``.

Порядок расчёта:
1. Высота и масса жидкости пропорциональны наполнению.
2. Центр масс – средневзвешенное ЦМ пустой банки (H/2) и жидкости (hₗ/2).
3. Угол опрокидывания ``atan(r / h_цм)`` и критическое ускорение.
4. Коэффициент устойчивости ``a_crit / a`` и вердикт ``a ≥ a_crit``.

Функция ``compute_stability`` чистая: её можно вызывать хоть на каждый
кадр отрисовки.
"""

from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass

from .formulas import (
    center_of_mass_height,
    critical_acceleration,
    liquid_height,
    liquid_mass,
    tipping_angle,
)
from ..domain.container import ContainerSpec

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StabilityResult:
    """Производные величины для одного набора входов."""

    liquid_height_mm: float
    liquid_mass_g: float
    total_mass_g: float
    center_of_mass_height_mm: float
    tipping_angle_rad: float
    critical_acceleration: float   # м/с²
    stability_factor: float        # a_crit / a, inf при a = 0
    would_tip: bool

    @property
    def tipping_angle_deg(self) -> float:
        return math.degrees(self.tipping_angle_rad)

    def as_dict(self) -> dict:
        return asdict(self)


def compute_stability(
    container: ContainerSpec,
    fill_percent: float,
    acceleration: float,
) -> StabilityResult:
    """Рассчитать устойчивость банки.

    ``fill_percent`` не обрезается – это задача вызывающего кода.
    При ``acceleration == 0`` коэффициент устойчивости равен ``math.inf``.
    """
    h_liq = liquid_height(fill_percent, container)
    m_liq = liquid_mass(fill_percent, container)
    m_total = container.empty_mass_g + m_liq

    com = center_of_mass_height(fill_percent, container)
    angle = tipping_angle(container.radius_mm, com)
    a_crit = critical_acceleration(container, fill_percent)

    factor = math.inf if acceleration == 0 else a_crit / acceleration
    would_tip = acceleration >= a_crit

    logger.debug(
        "fill=%.1f%% com=%.2fmm angle=%.4f a_crit=%.3f a=%.2f tip=%s",
        fill_percent,
        com,
        angle,
        a_crit,
        acceleration,
        would_tip,
    )

    return StabilityResult(
        liquid_height_mm=h_liq,
        liquid_mass_g=m_liq,
        total_mass_g=m_total,
        center_of_mass_height_mm=com,
        tipping_angle_rad=angle,
        critical_acceleration=a_crit,
        stability_factor=factor,
        would_tip=would_tip,
    )
