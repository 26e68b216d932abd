from __future__ import annotations

import pyomo.environ as pyo

from . import AbstractFillOptimizer, OptimalFillResult
from .scan import ScanOptimizer
from ..core.fill_model import build_fill_model
from ..core.formulas import critical_acceleration
from ..domain.container import ContainerSpec


class PyomoFillOptimizer(AbstractFillOptimizer):
    """Wrapper that builds and solves the continuous Pyomo fill model."""

    def __init__(self, solver: str = "ipopt") -> None:
        self.solver = solver

    def find_optimal_fill(self, container: ContainerSpec) -> OptimalFillResult:
        # No mass at any fill: COM is pinned at H/2, nothing to optimise
        if container.empty_mass_g == 0 and container.liquid_volume_ml == 0:
            return ScanOptimizer().find_optimal_fill(container)

        model = build_fill_model(container, solver=self.solver)
        fill = min(100.0, max(0.0, float(pyo.value(model.fill))))
        return OptimalFillResult(fill, critical_acceleration(container, fill))
