# cts/domain/presets.py

from typing import Dict

from .container import ContainerSpec

DEFAULT_PRESET = "redbull"

# Размеры в мм, массы в г, объём в мл
PRESETS: Dict[str, ContainerSpec] = {
    "redbull": ContainerSpec(
        height_mm=168,
        radius_mm=32,
        empty_mass_g=15,
        liquid_volume_ml=473,
        name="Red Bull",
        color=(0, 112, 192),
        liquid_color=(255, 200, 50),
    ),
    "monster": ContainerSpec(
        height_mm=178,
        radius_mm=33,
        empty_mass_g=18,
        liquid_volume_ml=500,
        name="Monster",
        color=(0, 150, 50),
        liquid_color=(100, 255, 100),
    ),
    "cola": ContainerSpec(
        height_mm=123,
        radius_mm=33,
        empty_mass_g=13,
        liquid_volume_ml=355,
        name="Coca-Cola",
        color=(200, 0, 0),
        liquid_color=(60, 30, 0),
    ),
}


def get_preset(key: str = DEFAULT_PRESET) -> ContainerSpec:
    """Return the preset registered under *key*.

    Raises
    ------
    ValueError
        If *key* is not in :data:`PRESETS`.
    """
    try:
        return PRESETS[key]
    except KeyError:
        raise ValueError(f"Unknown container preset '{key}'") from None
