# cts/core/sweep.py
"""Перебор наполнения 0…100 %.

Сетка ``fill_samples`` общая для поиска оптимума и для графика
a_crit(fill); значения в каждой точке считаются одной функцией
``critical_acceleration``.
"""

from __future__ import annotations

import numpy as np
import pandas as pd

from .formulas import center_of_mass_height, critical_acceleration
from ..constants import CURVE_STEP
from ..domain.container import ContainerSpec


def fill_samples(step: float) -> np.ndarray:
    """Сетка 0, step, 2·step, … до 100 (включительно, если step делит 100)."""
    if step <= 0:
        raise ValueError(f"Sweep step must be positive, got {step}")
    n = int(np.floor(100.0 / step + 1e-9))
    # i * step, а не накопление суммы: узлы не «плывут»
    return np.arange(n + 1) * step


def critical_acceleration_curve(
    container: ContainerSpec, step: float = CURVE_STEP
) -> pd.DataFrame:
    """Таблица для графика устойчивости (по одной строке на узел сетки)."""
    records = [
        {
            "fill, %": float(fill),
            "COM, mm": center_of_mass_height(float(fill), container),
            "a_crit, m/s²": critical_acceleration(container, float(fill)),
        }
        for fill in fill_samples(step)
    ]
    return pd.DataFrame.from_records(records)
