# cts/core/formulas.py

import math

from ..constants import G, LIQUID_DENSITY
from ..domain.container import ContainerSpec


def liquid_height(fill_percent: float, container: ContainerSpec) -> float:
    """Высота столба жидкости (мм); сечение банки постоянно."""
    return fill_percent / 100.0 * container.height_mm


def liquid_mass(fill_percent: float, container: ContainerSpec) -> float:
    """Масса жидкости (г) при плотности LIQUID_DENSITY."""
    return fill_percent / 100.0 * container.liquid_volume_ml * LIQUID_DENSITY


def center_of_mass_height(fill_percent: float, container: ContainerSpec) -> float:
    """Высота центра масс банки с жидкостью над основанием (мм).

    Formula: *h* = (m₀·H/2 + mₗ·hₗ/2) / (m₀ + mₗ).
    При нулевой общей массе взвешивать нечего, возвращается H/2.
    """
    m_liquid = liquid_mass(fill_percent, container)
    total = container.empty_mass_g + m_liquid
    if total == 0:
        return container.height_mm / 2.0
    moment = (
        container.empty_mass_g * container.height_mm / 2.0
        + m_liquid * liquid_height(fill_percent, container) / 2.0
    )
    return moment / total


def tipping_angle(radius: float, com_height: float) -> float:
    """Угол опрокидывания (рад) между вертикалью и линией ребро–ЦМ."""
    return math.atan(radius / com_height)


def critical_acceleration(container: ContainerSpec, fill_percent: float) -> float:
    """Критическое горизонтальное ускорение (м/с²) при данном наполнении.

    Formula: *a_crit* = g · tan(atan(r / h_цм)).
    Общая функция для модели устойчивости, поиска оптимума и графика.
    """
    com = center_of_mass_height(fill_percent, container)
    return G * math.tan(tipping_angle(container.radius_mm, com))
