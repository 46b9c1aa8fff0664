"""
Payment-frequency calendar utilities for EscalaFin.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta

import pandas as pd

from .kinds import Frequency

_PAYMENTS_PER_YEAR = {
    Frequency.SEMANAL: 52,
    Frequency.CATORCENAL: 26,
    Frequency.QUINCENAL: 24,
    Frequency.MENSUAL: 12,
}

_DAYS_PER_PERIOD = {
    Frequency.SEMANAL: 7,
    Frequency.CATORCENAL: 14,
    Frequency.QUINCENAL: 15,
}


def get_payments_per_year(frequency: str) -> int:
    """
    Number of installments per year for a payment frequency.

    Unrecognised frequencies are treated as ``MENSUAL`` (12).

    **Example:**
        ```python
        get_payments_per_year("CATORCENAL")  # 26
        get_payments_per_year("ANUAL")       # 12 (fallback)
        ```
    """
    return _PAYMENTS_PER_YEAR.get(frequency, 12)


def add_months(start: date, months: int) -> date:
    """
    Return ``start`` shifted by a number of calendar months.

    Days past the end of the target month roll over into the next one, so
    Jan 31 plus one month is Mar 2 (Mar 3 outside leap years). ``datetime``
    inputs keep their time of day.
    """
    first = pd.Timestamp(start).replace(day=1) + pd.DateOffset(months=months)
    shifted = first + pd.Timedelta(days=start.day - 1)
    if isinstance(start, datetime):
        return shifted.to_pydatetime()
    return shifted.date()


def _shift(start: date, periods: int, frequency: str) -> date:
    days = _DAYS_PER_PERIOD.get(frequency)
    if days is None:
        return add_months(start, periods)
    return start + timedelta(days=periods * days)


def calculate_end_date(start_date: date, number_of_payments: int, frequency: str) -> date:
    """
    Date of the last installment of a loan.

    Adds ``number_of_payments`` periods of 7, 14 or 15 days for ``SEMANAL``,
    ``CATORCENAL`` and ``QUINCENAL``; anything else adds calendar months.
    Never raises; a count of zero returns ``start_date`` itself.
    """
    return _shift(start_date, number_of_payments, frequency)


def payment_dates(start_date: date, number_of_payments: int, frequency: str) -> list[date]:
    """
    Due dates of installments 1..n.

    Monthly dates are computed from ``start_date`` for every installment rather
    than chained, so a loan starting on the 31st returns to the 31st whenever
    the month has one and rolls into the following month otherwise. The last
    date always equals ``calculate_end_date``.
    """
    return [_shift(start_date, k, frequency) for k in range(1, number_of_payments + 1)]
