"""
Period-count policies.

These policies turn years to maturity and coupon frequency into a whole
number of coupon periods. The product is not an integer for maturities
such as 8.2 years, and each policy handles that case differently.
"""

from abc import ABC
from abc import abstractmethod
import math

from bond_yield.domain.errors import InvalidInputError
from bond_yield.domain.types import PolicyOutput
from bond_yield.engine.rounding import round_half_away_from_zero

# Products within this distance of an integer count as whole periods
INTEGER_TOLERANCE = 1e-9


def _nearest_whole(raw: float) -> int | None:
  nearest = round(raw)
  if abs(raw - nearest) <= INTEGER_TOLERANCE:
    return int(nearest)
  return None


class PeriodCountPolicy(ABC):
  """
  Base class for period-count policies.

  Subclasses implement compute() to return the number of coupon periods.
  """

  @abstractmethod
  def compute(
      self,
      years_to_maturity: float,
      periods_per_year: int,
  ) -> PolicyOutput[int]:
    """
    Compute total coupon periods.

    Args:
      years_to_maturity: Remaining life in years
      periods_per_year: Coupon periods per year

    Returns:
      PolicyOutput with a period count >= 1 and diagnostics
    """


class RejectFractional(PeriodCountPolicy):
  """Accept whole period counts only."""

  def compute(
      self,
      years_to_maturity: float,
      periods_per_year: int,
  ) -> PolicyOutput[int]:
    raw = years_to_maturity * periods_per_year
    whole = _nearest_whole(raw)
    if whole is None or whole < 1:
      raise InvalidInputError(
          f'yearsToMaturity={years_to_maturity!r} gives {raw!r} coupon '
          f'periods at {periods_per_year} per year; a whole number of '
          'periods is required',
          ['yearsToMaturity: fractional period count'])
    return PolicyOutput(value=whole,
                        diag={
                            'period_method': 'reject',
                            'raw_periods': raw,
                        })


class FloorPeriods(PeriodCountPolicy):
  """Drop the trailing partial period (at least one period)."""

  def compute(
      self,
      years_to_maturity: float,
      periods_per_year: int,
  ) -> PolicyOutput[int]:
    raw = years_to_maturity * periods_per_year
    whole = _nearest_whole(raw)
    periods = whole if whole is not None else math.floor(raw)
    return PolicyOutput(value=max(1, periods),
                        diag={
                            'period_method': 'floor',
                            'raw_periods': raw,
                            'adjusted': whole is None,
                        })


class RoundPeriods(PeriodCountPolicy):
  """Round to the nearest period count, ties away from zero."""

  def compute(
      self,
      years_to_maturity: float,
      periods_per_year: int,
  ) -> PolicyOutput[int]:
    raw = years_to_maturity * periods_per_year
    whole = _nearest_whole(raw)
    periods = (whole if whole is not None else int(
        round_half_away_from_zero(raw, 0)))
    return PolicyOutput(value=max(1, periods),
                        diag={
                            'period_method': 'round',
                            'raw_periods': raw,
                            'adjusted': whole is None,
                        })
