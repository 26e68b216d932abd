# cts/domain/container.py
"""Геометрия и массы банки.

**ContainerSpec** описывает цилиндрическую банку постоянного сечения:

* **height_mm** – высота банки *H* (мм), > 0;
* **radius_mm** – радиус основания *r* (мм), > 0;
* **empty_mass_g** – масса пустой банки (г), ≥ 0;
* **liquid_volume_ml** – объём жидкости при 100 % наполнения (мл), ≥ 0.

Поля ``name``, ``color`` и ``liquid_color`` нужны только для отрисовки
и в расчётах не участвуют.

Проверка входов выполняется в ``__post_init__``: некорректная геометрия
дала бы NaN в угле опрокидывания, поэтому ошибка выбрасывается сразу.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Tuple

RGB = Tuple[int, int, int]


class InvalidContainerError(ValueError):
    """Raised for geometry or masses the stability model cannot handle."""


@dataclass(frozen=True, slots=True)
class ContainerSpec:
    """Неизменяемое описание банки (пресет или пользовательские значения)."""

    height_mm: float
    radius_mm: float
    empty_mass_g: float
    liquid_volume_ml: float

    # --- только для отображения ---
    name: str = "Custom"
    color: RGB = (128, 128, 128)
    liquid_color: RGB = (80, 160, 255)

    def __post_init__(self) -> None:
        # NaN проходит любые сравнения, поэтому сначала isfinite
        for field_name in ("height_mm", "radius_mm", "empty_mass_g", "liquid_volume_ml"):
            value = getattr(self, field_name)
            if not math.isfinite(value):
                raise InvalidContainerError(
                    f"{field_name} must be finite, got {value}"
                )
        if self.height_mm <= 0:
            raise InvalidContainerError(
                f"height_mm must be positive, got {self.height_mm}"
            )
        if self.radius_mm <= 0:
            raise InvalidContainerError(
                f"radius_mm must be positive, got {self.radius_mm}"
            )
        if self.empty_mass_g < 0:
            raise InvalidContainerError(
                f"empty_mass_g must be non-negative, got {self.empty_mass_g}"
            )
        if self.liquid_volume_ml < 0:
            raise InvalidContainerError(
                f"liquid_volume_ml must be non-negative, got {self.liquid_volume_ml}"
            )

    def with_overrides(self, **fields) -> "ContainerSpec":
        """Вернуть копию с заменёнными полями (ползунки H, r, m).

        ``dataclasses.replace`` снова вызывает ``__post_init__``, так что
        переопределённые значения тоже проходят проверку.
        """
        return replace(self, **fields)

    def same_physics(self, other: "ContainerSpec") -> bool:
        """True, если совпадают все поля, влияющие на расчёт."""
        return (
            self.height_mm == other.height_mm
            and self.radius_mm == other.radius_mm
            and self.empty_mass_g == other.empty_mass_g
            and self.liquid_volume_ml == other.liquid_volume_ml
        )
