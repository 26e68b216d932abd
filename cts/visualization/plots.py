# cts/visualization/plots.py
"""Мини‑обёртки над matplotlib для отображения сцены и кривой устойчивости.

Функции только читают результаты модели. Если ``ax`` не передан,
создаётся новая фигура и вызывается ``plt.show()``; в любом случае
возвращается объект ``Axes`` (удобно для тестов и отчётов).
"""

from __future__ import annotations

import matplotlib.pyplot as plt
import pandas as pd
from matplotlib.patches import Arc, Circle, FancyArrowPatch, Rectangle

from ..core.stability import StabilityResult
from ..domain.state import SimulationState
from ..optimizers import OptimalFillResult

FORCE_SCALE = 10.0  # мм стрелки на 1 м/с²
ARC_DIAMETER = 24.0  # мм


def _rgb(color, alpha: float = 1.0):
    return (color[0] / 255, color[1] / 255, color[2] / 255, alpha)


def _arrow(ax, start, end, color, label):
    ax.add_patch(
        FancyArrowPatch(start, end, arrowstyle="-|>", mutation_scale=15, lw=3, color=color)
    )
    mid = ((start[0] + end[0]) / 2, (start[1] + end[1]) / 2)
    ax.annotate(label, mid, textcoords="offset points", xytext=(0, 8),
                ha="center", color=color, fontsize=9)


# ---------------------------------------------------------------------------
# 1) Сцена: банка на столе
# ---------------------------------------------------------------------------

def plot_container(
    state: SimulationState,
    result: StabilityResult,
    ax=None,
    show_com: bool = True,
    show_force: bool = True,
    show_pivot: bool = True,
):
    """Банка в разрезе (мм), жидкость, ЦМ, ребро опрокидывания и силы."""
    standalone = ax is None
    if standalone:
        _, ax = plt.subplots(figsize=(6, 7))

    c = state.container
    h, r = c.height_mm, c.radius_mm
    com = result.center_of_mass_height_mm

    # Стол
    ax.axhline(0, color="0.3", lw=3)

    # Корпус и жидкость
    ax.add_patch(Rectangle((-r, 0), 2 * r, h, fc=_rgb(c.color, 0.8), ec="black", lw=2))
    if state.fill_percent > 0:
        ax.add_patch(
            Rectangle((-r, 0), 2 * r, result.liquid_height_mm, fc=_rgb(c.liquid_color, 0.7))
        )
    ax.text(0, 0.6 * h, c.name, ha="center", va="center", color="white", weight="bold")
    if state.fill_percent < 100:
        ax.text(0, 0.4 * h, f"{state.fill_percent:.0f}%", ha="center", color="yellow")

    if show_pivot:
        ax.add_patch(Circle((r, 0), 3, color="orange"))
        ax.annotate("PIVOT", (r, 0), textcoords="offset points", xytext=(0, -15),
                    ha="center", color="orange", fontsize=9)

    if show_com:
        ax.plot(0, com, marker="o", ms=10, color="red")
        ax.annotate("COM", (0, com), textcoords="offset points", xytext=(12, 0),
                    va="center", color="red")
        ax.plot([0, r], [com, com], color="red", alpha=0.4, lw=1)
        ax.plot([0, r], [com, 0], color="red", alpha=0.4, lw=1)

    if show_force:
        _arrow(ax, (0, com), (state.acceleration * FORCE_SCALE, com), "tab:blue", "Train Force")
        gravity = result.total_mass_g / 100 * FORCE_SCALE
        _arrow(ax, (0, com), (0, com - gravity), "purple", "Gravity")
        if result.would_tip:
            # угол между вертикалью над ребром и линией ребро–ЦМ
            ax.add_patch(
                Arc((r, 0), ARC_DIAMETER, ARC_DIAMETER, theta1=90.0,
                    theta2=90.0 + result.tipping_angle_deg, color="red", lw=2)
            )
            ax.text(r + 10, 20, "TIPPING!", color="red", weight="bold")

    ax.set_aspect("equal")
    ax.set_xlim(-r - 40, max(r, state.acceleration * FORCE_SCALE) + 60)
    ax.set_ylim(-30, h + 30)
    ax.set_xlabel("x, mm")
    ax.set_ylabel("z, mm")
    ax.set_title(f"{c.name}: a = {state.acceleration:.1f} m/s²")

    if standalone:
        plt.show()
    return ax

# ---------------------------------------------------------------------------
# 2) Кривая a_crit(fill)
# ---------------------------------------------------------------------------

def plot_stability_curve(
    curve: pd.DataFrame,
    state: SimulationState,
    optimal: OptimalFillResult,
    ax=None,
):
    """Критическое ускорение от наполнения + текущее/оптимальное наполнение."""
    standalone = ax is None
    if standalone:
        _, ax = plt.subplots(figsize=(8, 6))

    ax.plot(curve["fill, %"], curve["a_crit, m/s²"], color="tab:blue", lw=3,
            label="Stability Curve")
    ax.axvline(state.fill_percent, color="orange", lw=2,
               label=f"Current Fill ({state.fill_percent:.0f}%)")
    ax.axvline(optimal.best_fill_percent, color="green", lw=2,
               label=f"Optimal Fill ({optimal.best_fill_percent:.1f}%)")
    ax.axhline(state.acceleration, color="red", alpha=0.6, lw=2,
               label=f"Applied Force ({state.acceleration:.1f} m/s²)")

    ax.set_xlim(0, 100)
    ax.set_ylim(0, curve["a_crit, m/s²"].max() * 1.1)
    ax.set_title("Stability Analysis: Critical Acceleration vs Fill Level")
    ax.set_xlabel("Fill Level (%)")
    ax.set_ylabel("Critical Acceleration (m/s²)")
    ax.grid(True)
    ax.legend()

    if standalone:
        plt.show()
    return ax
