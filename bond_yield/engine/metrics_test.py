import pytest

from bond_yield.domain.types import PremiumOrDiscount
from bond_yield.engine.metrics import classify_premium_discount
from bond_yield.engine.metrics import current_yield
from bond_yield.engine.metrics import total_interest


class TestCurrentYield:
  """Tests for current_yield function."""

  def test_at_par(self):
    """At par current yield equals the coupon rate."""
    assert current_yield(1000.0, 5.0, 1000.0) == pytest.approx(0.05)

  def test_premium(self):
    """Manual calculation: 80 / 1100 = 0.072727."""
    assert current_yield(1000.0, 8.0, 1100.0) == pytest.approx(0.072727,
                                                               abs=1e-6)

  def test_zero_coupon(self):
    """No coupon, no current yield."""
    assert current_yield(1000.0, 0.0, 614.0) == 0.0


class TestTotalInterest:
  """Tests for total_interest function."""

  def test_semi_annual(self):
    """20 coupons of 25."""
    assert total_interest(25.0, 20) == 500.0


class TestClassifyPremiumDiscount:
  """Tests for classify_premium_discount function."""

  def test_premium(self):
    assert classify_premium_discount(1100.0, 1000.0) is PremiumOrDiscount.PREMIUM

  def test_discount(self):
    assert classify_premium_discount(950.0, 1000.0) is PremiumOrDiscount.DISCOUNT

  def test_par(self):
    assert classify_premium_discount(1000.0, 1000.0) is PremiumOrDiscount.PAR

  def test_wire_values(self):
    """Enum values match the output record strings."""
    assert [c.value for c in PremiumOrDiscount] == ['Premium', 'Discount', 'Par']
