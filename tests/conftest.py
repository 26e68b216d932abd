import importlib
import os
import sys

import matplotlib
import pytest

matplotlib.use("Agg")

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

ContainerSpec = importlib.import_module('cts.domain.container').ContainerSpec
PRESETS = importlib.import_module('cts.domain.presets').PRESETS


@pytest.fixture
def redbull():
    return PRESETS['redbull']


@pytest.fixture
def custom_can():
    return ContainerSpec(height_mm=120, radius_mm=30, empty_mass_g=20, liquid_volume_ml=300)


@pytest.fixture
def massless_can():
    return ContainerSpec(height_mm=100, radius_mm=25, empty_mass_g=0, liquid_volume_ml=250)
