"""Distribution statistics derived from running sums.

Time series accumulators only keep the sum, the sum of squares and the number
of observed values. The squared distance from the mean can be expressed with
those alone::

    Σ (x - μ)² = Σ x² - 2μ Σ x + n μ²
               = sum_squares - 2 (sum / n) sum + n (sum / n)²
               = sum_squares - sum² / n

so no raw samples need to be retained.
"""

import math


def squared_deviation(sum: float, sum_squares: float, n: float) -> float:
    """Return Σ (x - μ)² computed from running sums.

    Args:
        sum: Sum of observed values.
        sum_squares: Sum of squared observed values.
        n: Number of observed values. Must be non-zero.

    Raises:
        ZeroDivisionError: If n is zero.
    """
    return sum_squares - sum**2 / n


def stddev(sum: float, sum_squares: float, count: int) -> float:
    """Return the population standard deviation √(Σ (x - μ)² / N).

    Rounding can push the squared deviation slightly below zero when the true
    value is zero; it is clamped to 0.0 before taking the square root.

    Args:
        sum: Sum of observed values.
        sum_squares: Sum of squared observed values.
        count: Number of observed values. Must be non-zero.

    Raises:
        ZeroDivisionError: If count is zero.
    """
    variance = squared_deviation(sum, sum_squares, count) / count
    return math.sqrt(max(variance, 0.0))
