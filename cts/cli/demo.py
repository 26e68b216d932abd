# cts/cli/demo.py   (внешний скрипт запуска)

import logging

from cts import PRESETS, StabilityAnalyzer


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    # Сводка по всем пресетам при торможении 5 м/с²
    for key in PRESETS:
        analyzer = StabilityAnalyzer(key, fill_percent=100.0, acceleration=5.0)
        print(analyzer.summary())
        print()

    sim = StabilityAnalyzer("redbull", fill_percent=40.0, acceleration=3.0)
    print(sim.curve().to_string(index=False))
    sim.plot_container()
    sim.plot_stability_curve()

    # Свои размеры поверх пресета
    sim.override_container(height_mm=200, radius_mm=30)
    print(sim.summary())
    sim.plot_stability_curve()


if __name__ == "__main__":
    main()
