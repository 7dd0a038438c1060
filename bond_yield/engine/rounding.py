"""Output rounding: yields to 6 decimals, currency to cents."""

from decimal import Decimal
from decimal import ROUND_HALF_UP
import math

YIELD_DECIMALS = 6
CURRENCY_DECIMALS = 2


def round_half_away_from_zero(value: float, decimals: int) -> float:
  """
  Round with ties going away from zero (2.675 -> 2.68, -0.125 -> -0.13).

  Works on the shortest repr of the float, so values that print as an
  exact tie are treated as one. Non-finite values are returned unchanged.
  """
  if not math.isfinite(value):
    return value
  quantum = Decimal(1).scaleb(-decimals)
  rounded = Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP)
  result = float(rounded)
  # Avoid emitting -0.0
  return result + 0.0 if result == 0 else result


def round_yield(value: float) -> float:
  return round_half_away_from_zero(value, YIELD_DECIMALS)


def round_currency(value: float) -> float:
  return round_half_away_from_zero(value, CURRENCY_DECIMALS)
