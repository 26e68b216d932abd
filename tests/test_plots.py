import importlib

import matplotlib.pyplot as plt
import pytest
from matplotlib.patches import Arc

StabilityAnalyzer = importlib.import_module('cts.facade.analyzer').StabilityAnalyzer


def test_plot_container_draws_scene():
    sim = StabilityAnalyzer('redbull', fill_percent=60, acceleration=8.0)
    fig, ax = plt.subplots()
    out = sim.plot_container(ax=ax)
    assert out is ax
    # table line + COM marker + two COM guide lines
    assert len(ax.lines) >= 4
    assert any(t.get_text() == 'TIPPING!' for t in ax.texts)
    plt.close(fig)


def test_tipping_arc_spans_tipping_angle():
    sim = StabilityAnalyzer('redbull', fill_percent=60, acceleration=8.0)
    fig, ax = plt.subplots()
    sim.plot_container(ax=ax)
    arcs = [p for p in ax.patches if isinstance(p, Arc)]
    assert len(arcs) == 1
    arc = arcs[0]
    assert tuple(arc.center) == (sim.container.radius_mm, 0)
    assert arc.theta2 - arc.theta1 == pytest.approx(sim.result().tipping_angle_deg)
    plt.close(fig)


def test_no_arc_when_stable():
    sim = StabilityAnalyzer('redbull', fill_percent=60, acceleration=1.0)
    fig, ax = plt.subplots()
    sim.plot_container(ax=ax)
    assert not any(isinstance(p, Arc) for p in ax.patches)
    plt.close(fig)


def test_plot_container_toggles():
    sim = StabilityAnalyzer('cola', fill_percent=100, acceleration=1.0)
    fig, ax = plt.subplots()
    sim.plot_container(ax=ax, show_com=False, show_force=False, show_pivot=False)
    assert not any(t.get_text() in ('COM', 'PIVOT', 'TIPPING!') for t in ax.texts)
    plt.close(fig)


def test_plot_stability_curve_legend():
    sim = StabilityAnalyzer('monster', fill_percent=40, acceleration=2.0)
    fig, ax = plt.subplots()
    sim.plot_stability_curve(ax=ax)
    labels = [t.get_text() for t in ax.get_legend().get_texts()]
    assert labels[0] == 'Stability Curve'
    assert labels[1] == 'Current Fill (40%)'
    assert labels[2].startswith('Optimal Fill (')
    assert labels[3] == 'Applied Force (2.0 m/s²)'
    plt.close(fig)
