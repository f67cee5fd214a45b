"""
Core: Decimal-примитивы, модели результатов и JSON-контракты.

Ничего не знает о конкретных форматтерах и об источниках входных данных.
"""
