"""
One-shot bond metrics: current yield and premium/discount classification.
"""

from bond_yield.domain.types import PremiumOrDiscount


def current_yield(
    face_value: float,
    coupon_rate: float,
    market_price: float,
) -> float:
  """
  Annual coupon income divided by market price.

  Ignores time value and the capital gain or loss at maturity.

  Args:
    face_value: Par value
    coupon_rate: Annual coupon rate in percent (5 means 5%)
    market_price: Current price, assumed positive

  Returns:
    Current yield as a decimal (0.05 for 5%)
  """
  annual_coupon = (coupon_rate / 100) * face_value
  return annual_coupon / market_price


def total_interest(coupon_payment: float, total_periods: int) -> float:
  '''Sum of coupons over the life of the bond, no discounting.'''
  return coupon_payment * total_periods


def classify_premium_discount(
    market_price: float,
    face_value: float,
) -> PremiumOrDiscount:
  """Premium above face value, Discount below, Par when equal."""
  if market_price > face_value:
    return PremiumOrDiscount.PREMIUM
  if market_price < face_value:
    return PremiumOrDiscount.DISCOUNT
  return PremiumOrDiscount.PAR
