# cts/constants.py
"""Физические константы и настройки расчёта.

Все модули пакета берут значения отсюда, чтобы не размазывать
«магические числа» по коду.
"""

G = 9.81  # ускорение свободного падения, м/с²
LIQUID_DENSITY = 1.0  # г/мл, жидкость считаем водой

FILL_STEP = 0.5  # шаг перебора наполнения при поиске оптимума, %
CURVE_STEP = 1.0  # шаг кривой a_crit(fill) для графика, %
NEAR_OPTIMAL_TOLERANCE = 5.0  # полоса «почти оптимально», п.п.

DEFAULT_FILL_PERCENT = 100.0
DEFAULT_ACCELERATION = 5.0  # м/с²
