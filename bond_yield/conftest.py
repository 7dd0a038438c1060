import pytest

from bond_yield.domain.types import BondInput
from bond_yield.domain.types import CouponFrequency


def _bond(
    face_value: float,
    coupon_rate: float,
    market_price: float,
    years: float,
    frequency: CouponFrequency = CouponFrequency.ANNUAL,
) -> BondInput:
  """Helper to build a BondInput."""
  return BondInput(
      face_value=face_value,
      coupon_rate=coupon_rate,
      market_price=market_price,
      years_to_maturity=years,
      coupon_frequency=frequency,
  )


@pytest.fixture
def par_bond() -> BondInput:
  """10y annual 5% coupon priced at par."""
  return _bond(1000, 5, 1000, 10)


@pytest.fixture
def zero_coupon_bond() -> BondInput:
  """10y zero-coupon bond priced at 614."""
  return _bond(1000, 0, 614.0, 10)


@pytest.fixture
def one_year_bond() -> BondInput:
  """1y annual 6% coupon priced at 980."""
  return _bond(1000, 6, 980, 1)


@pytest.fixture
def discount_semi_annual_bond() -> BondInput:
  """10y semi-annual 5% coupon priced at 950."""
  return _bond(1000, 5, 950, 10, CouponFrequency.SEMI_ANNUAL)


@pytest.fixture
def premium_bond() -> BondInput:
  """5y annual 8% coupon priced at 1100."""
  return _bond(1000, 8, 1100, 5)
