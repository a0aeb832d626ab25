"""Regression line, error metrics and variance for numeric samples."""

from __future__ import annotations

from collections.abc import Sequence


def _check_pair(first: Sequence[float], second: Sequence[float]) -> int:
    if len(first) != len(second):
        raise ValueError("both sequences must have the same length")
    if not first:
        raise ValueError("sequences must not be empty")
    return len(first)


def linear_regression(x: Sequence[float], y: Sequence[float]) -> tuple[float, float]:
    """Return ``(intercept, slope)`` of the least-squares line through the points."""
    n = _check_pair(x, y)
    sum_x = sum(x)
    sum_y = sum(y)
    sum_x2 = sum(value * value for value in x)
    sum_xy = sum(a * b for a, b in zip(x, y))
    denominator = n * sum_x2 - sum_x**2
    if denominator == 0:
        raise ValueError("x values must not all be equal")
    intercept = (sum_y * sum_x2 - sum_x * sum_xy) / denominator
    slope = (n * sum_xy - sum_x * sum_y) / denominator
    return intercept, slope


def mae(predicted: Sequence[float], actual: Sequence[float]) -> float:
    """Return the mean absolute error between two equally long sequences."""
    n = _check_pair(predicted, actual)
    return sum(abs(a - p) for p, a in zip(predicted, actual)) / n


def mape(predicted: Sequence[float], actual: Sequence[float]) -> float:
    """Return the mean absolute percentage error, as a fraction of ``actual``."""
    n = _check_pair(predicted, actual)
    return sum(abs((a - p) / a) for p, a in zip(predicted, actual)) / n


def mse(predicted: Sequence[float], actual: Sequence[float]) -> float:
    """Return the mean squared error between two equally long sequences."""
    n = _check_pair(predicted, actual)
    return sum((p - a) ** 2 for p, a in zip(predicted, actual)) / n


def variance(data: Sequence[float]) -> float:
    """Return the population variance of ``data``."""
    if not data:
        raise ValueError("data must not be empty")
    mean = sum(data) / len(data)
    return sum((value - mean) ** 2 for value in data) / len(data)