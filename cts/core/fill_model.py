# cts/core/fill_model.py
from __future__ import annotations

import pyomo.environ as pyo

from ..constants import FILL_STEP, G, LIQUID_DENSITY
from ..domain.container import ContainerSpec


def build_fill_model(
    container: ContainerSpec,
    solver: str | None = None,
) -> pyo.ConcreteModel:
    """
    Нелинейная модель ``max a_crit(fill)``.

    * ``0 ≤ fill ≤ 100``;
    * ``com · (m₀ + mₗ) = m₀·H/2 + mₗ·hₗ/2`` (ЦМ без деления на массу);
    * цель ``g · r / com``.

    При ``m₀ = 0`` нижняя граница наполнения – ``FILL_STEP``: при
    ``fill = 0`` ограничение вырождается в ``com · 0 = 0`` и цель
    становится неограниченной. Банка без массы вовсе (``m₀ = V = 0``)
    сюда не передаётся, см. ``PyomoFillOptimizer``.

    Если указан ``solver``, модель будет сразу решена и
    возвращена в решённом состоянии.
    """
    H = container.height_mm
    r = container.radius_mm
    m0 = container.empty_mass_g
    vol = container.liquid_volume_ml * LIQUID_DENSITY

    m = pyo.ConcreteModel("CTS-fill")

    # ------------ переменные ------------
    fill_lb = FILL_STEP if m0 == 0 else 0.0
    m.fill = pyo.Var(bounds=(fill_lb, 100.0), initialize=50.0)  # %
    # com > 0, иначе цель не определена
    m.com = pyo.Var(bounds=(1e-6, H), initialize=H / 2)      # мм

    # ------------ выражения -------------
    m.h_liq = pyo.Expression(expr=m.fill / 100.0 * H)
    m.m_liq = pyo.Expression(expr=m.fill / 100.0 * vol)

    # -------- центр масс ---------------
    m.com_def = pyo.Constraint(
        expr=m.com * (m0 + m.m_liq) == m0 * H / 2 + m.m_liq * m.h_liq / 2
    )

    # -------- цель --------------------
    m.obj = pyo.Objective(expr=G * r / m.com, sense=pyo.maximize)

    if solver:
        opt = pyo.SolverFactory(solver)
        if opt is None or not opt.available(exception_flag=False):
            raise RuntimeError(f"Pyomo solver '{solver}' is not available")
        result = opt.solve(m)
        if not pyo.check_optimal_termination(result):
            raise RuntimeError(
                f"Solver '{solver}' finished without an optimal solution: "
                f"{result.solver.termination_condition}"
            )

    return m
