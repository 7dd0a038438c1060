"""
Periodic cash-flow schedule for a bullet bond.

Payment dates advance from an anchor (settlement) date by whole calendar
months. When the anchor day does not exist in the target month the date is
clamped to that month's last day, e.g. 2024-08-31 + 6 months = 2025-02-28.
"""

import datetime as dt
from typing import List, Union

import pandas as pd

from bond_yield.domain.types import CashFlowPeriod
from bond_yield.engine.rounding import round_currency

DEFAULT_ANCHOR_DATE = dt.date(2026, 2, 23)

DateLike = Union[dt.date, str, pd.Timestamp]


def add_months(anchor_date: DateLike, months: int) -> dt.date:
  '''Advance by whole calendar months, clamping to month end.'''
  return (pd.Timestamp(anchor_date) + pd.DateOffset(months=months)).date()


def generate_cash_flow_schedule(
    face_value: float,
    coupon_payment: float,
    total_periods: int,
    periods_per_year: int,
    anchor_date: DateLike = DEFAULT_ANCHOR_DATE,
) -> List[CashFlowPeriod]:
  """
  Build the ordered per-period payment ledger.

  Every period pays the coupon; the final period also repays face value.
  Remaining principal stays at face value until the final period.
  Cumulative interest is coupon_payment * period, the same product
  total_interest uses, so the last row matches it to the cent.

  Args:
    face_value: Principal repaid with the last coupon
    coupon_payment: Cash coupon per period (unrounded)
    total_periods: Number of coupon periods, length of the result
    periods_per_year: 1 (annual) or 2 (semi-annual)
    anchor_date: Date the first period is counted from

  Returns:
    List of CashFlowPeriod for periods 1..total_periods with currency
    fields rounded to cents
  """
  months_per_period = 12 / periods_per_year
  periods = range(1, total_periods + 1)
  schedule = []
  for period in periods:
    is_final = period == total_periods
    principal_payment = face_value if is_final else 0.0

    schedule.append(
        CashFlowPeriod(
            period=period,
            payment_date=add_months(anchor_date,
                                    int(round(months_per_period * period))),
            coupon_payment=round_currency(coupon_payment),
            principal_payment=round_currency(principal_payment),
            total_payment=round_currency(coupon_payment + principal_payment),
            cumulative_interest=round_currency(coupon_payment * period),
            remaining_principal=round_currency(0.0 if is_final else face_value),
        ))

  return schedule
