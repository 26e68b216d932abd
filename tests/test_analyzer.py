import importlib

import pytest

StabilityAnalyzer = importlib.import_module('cts.facade.analyzer').StabilityAnalyzer
optimizers = importlib.import_module('cts.optimizers')
ScanOptimizer = importlib.import_module('cts.optimizers.scan').ScanOptimizer
status_mod = importlib.import_module('cts.core.status')
StabilityStatus = status_mod.StabilityStatus
InvalidContainerError = importlib.import_module('cts.domain.container').InvalidContainerError
get_preset = importlib.import_module('cts.domain.presets').get_preset


class CountingOptimizer(ScanOptimizer):
    def __init__(self):
        super().__init__()
        self.calls = 0

    def find_optimal_fill(self, container):
        self.calls += 1
        return super().find_optimal_fill(container)


def test_defaults():
    sim = StabilityAnalyzer()
    assert sim.state.preset == 'redbull'
    assert sim.state.fill_percent == 100.0
    assert sim.state.acceleration == 5.0
    assert sim.result().would_tip is True


def test_optimal_fill_only_follows_container():
    opt = CountingOptimizer()
    sim = StabilityAnalyzer('redbull', optimizer=opt)
    assert opt.calls == 1
    best = sim.optimal.best_fill_percent

    sim.set_fill_percent(30)
    sim.set_acceleration(2.5)
    assert opt.calls == 1
    assert sim.optimal.best_fill_percent == best

    sim.override_container(radius_mm=40)
    assert opt.calls == 2

    sim.select_container('cola')
    assert opt.calls == 3
    assert sim.container == get_preset('cola')
    assert sim.state.fill_percent == 30


def test_setters_clamp_inputs():
    sim = StabilityAnalyzer()
    assert sim.set_fill_percent(150).fill_percent == 100.0
    assert sim.set_fill_percent(-10).fill_percent == 0.0
    assert sim.set_acceleration(-3.0).acceleration == 3.0


def test_invalid_override_keeps_state():
    sim = StabilityAnalyzer()
    before = sim.state
    with pytest.raises(InvalidContainerError):
        sim.override_container(radius_mm=0)
    assert sim.state is before


def test_unknown_preset():
    with pytest.raises(ValueError):
        StabilityAnalyzer('fanta')


def test_result_recomputed_from_state():
    sim = StabilityAnalyzer('redbull', fill_percent=100, acceleration=5.0)
    assert sim.result().would_tip
    sim.set_acceleration(1.0)
    assert not sim.result().would_tip
    assert sim.result() == sim.result()


def test_status_messages():
    sim = StabilityAnalyzer('redbull', fill_percent=100, acceleration=5.0)
    assert sim.status() is StabilityStatus.TIPPING
    assert 'TIP OVER' in sim.status_message()

    best = sim.optimal.best_fill_percent
    sim.set_acceleration(1.0)
    sim.set_fill_percent(best + 4)
    assert sim.status() is StabilityStatus.NEAR_OPTIMAL

    sim.set_fill_percent(best + 5)
    assert sim.status() is StabilityStatus.ADJUST
    assert sim.status_message() == (
        f"For maximum stability, remove 5.0% of liquid to reach {best:.1f}% fill level."
    )

    sim.set_fill_percent(0)
    assert sim.status_message().startswith(f"For maximum stability, add {best:.1f}%")


def test_summary_series():
    sim = StabilityAnalyzer('monster', fill_percent=50, acceleration=0)
    summary = sim.summary()
    assert summary.name == 'Monster'
    assert summary['Stability factor'] == float('inf')
    assert summary['Would tip'] == False  # noqa: E712
    assert summary['Optimal fill, %'] == sim.optimal.best_fill_percent


def test_custom_container_has_no_preset(custom_can):
    sim = StabilityAnalyzer(custom_can, fill_percent=20)
    assert sim.state.preset is None
    assert len(sim.curve(step=5.0)) == 21
