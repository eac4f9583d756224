"""
Core: модели данных, нормализация чисел, сегментация и контракты опций.

Слой не зависит от конкретных языков: здесь нет ни одной словарной
таблицы, только примитивы, на которых строятся стратегии.
"""
