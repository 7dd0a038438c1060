"""
Bond price and price sensitivity at a trial discount rate.

Pure functions, no state. Rates here are periodic (per coupon period);
results for rate <= -1 are undefined and callers must guard against it.
"""

from collections.abc import Sequence
import math


def discount_factor(rate: float, t: int) -> float:
  """
  Compute 1 / (1 + rate)^t.

  Returns inf instead of raising when the power overflows, so a diverging
  Newton step surfaces as a non-finite rate rather than an exception.
  """
  try:
    return (1.0 + rate)**-t
  except OverflowError:
    return math.inf


def price_and_derivative(
    face_value: float,
    coupon_payment: float,
    rate: float,
    total_periods: int,
) -> tuple[float, float]:
  """
  Compute theoretical bond price and its first derivative.

    price(r)      = sum_{t=1..n} C/(1+r)^t + F/(1+r)^n
    derivative(r) = sum_{t=1..n} -t*C/(1+r)^(t+1) - n*F/(1+r)^(n+1)

  Args:
    face_value: Redemption amount F paid with the last coupon
    coupon_payment: Cash coupon C paid every period
    rate: Periodic discount rate r
    total_periods: Number of coupon periods n

  Returns:
    Tuple of (price, derivative) where derivative is d(price)/d(r)
  """
  price = 0.0
  derivative = 0.0

  for t in range(1, total_periods + 1):
    price += coupon_payment * discount_factor(rate, t)
    derivative -= t * coupon_payment * discount_factor(rate, t + 1)

  n = total_periods
  price += face_value * discount_factor(rate, n)
  derivative -= n * face_value * discount_factor(rate, n + 1)

  return price, derivative


def present_value(cash_flows: Sequence[float], rate: float) -> float:
  """
  Discount a sequence of per-period cash flows.

  Args:
    cash_flows: Amounts received at the end of periods 1, 2, ..., n
    rate: Periodic discount rate

  Returns:
    Sum of discounted cash flows
  """
  return sum(
      cf * discount_factor(rate, t) for t, cf in enumerate(cash_flows, start=1))
