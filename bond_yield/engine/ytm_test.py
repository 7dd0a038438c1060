import pytest

from bond_yield.domain.types import DerivativeZero
from bond_yield.domain.types import YtmSolution
from bond_yield.engine import ytm as ytm_module
from bond_yield.engine.pricing import present_value
from bond_yield.engine.ytm import initial_guess
from bond_yield.engine.ytm import solve_ytm


class TestInitialGuess:
  """Tests for initial_guess function."""

  def test_par_bond(self):
    """At par the approximation is exactly the coupon rate."""
    assert initial_guess(1000.0, 50.0, 1000.0, 10, 1) == pytest.approx(0.05)

  def test_discount_bond(self):
    """Manual calculation: (60 + 20 / 1) / 990 = 0.080808."""
    assert initial_guess(1000.0, 60.0, 980.0, 1, 1) == pytest.approx(0.080808,
                                                                     abs=1e-6)

  def test_semi_annual_is_periodic(self):
    """Semi-annual guess is the annual approximation halved.

    Manual calculation:
    annual = (25 x 2 + 50 / 10) / 975 = 0.056410
    periodic = 0.028205
    """
    guess = initial_guess(1000.0, 25.0, 950.0, 20, 2)

    assert guess == pytest.approx(0.028205, abs=1e-6)


class TestSolveYtm:
  """Tests for solve_ytm function."""

  def test_par_bond(self):
    """Par bond yields its coupon rate."""
    result = solve_ytm(1000.0, 50.0, 1000.0, 10, 1)

    assert isinstance(result, YtmSolution)
    assert result.converged
    assert result.rate == pytest.approx(0.05, abs=1e-9)
    assert result.iterations <= 2

  def test_zero_coupon_at_par_short_circuits(self):
    """Zero coupon at par returns exactly 0 without iterating."""
    result = solve_ytm(1000.0, 0.0, 1000.0, 10, 1)

    assert result == YtmSolution(rate=0.0, periodic_rate=0.0, iterations=0)

  def test_zero_coupon_discount(self):
    """Zero coupon yield is (F / P)^(1/n) - 1."""
    result = solve_ytm(1000.0, 0.0, 614.0, 10, 1)

    assert result.converged
    assert result.rate == pytest.approx((1000 / 614)**0.1 - 1, abs=1e-8)
    assert result.rate == pytest.approx(0.0499, abs=5e-4)

  def test_one_year_bond(self):
    """Manual calculation: 1060 / 980 - 1 = 0.081633."""
    result = solve_ytm(1000.0, 60.0, 980.0, 1, 1)

    assert result.rate == pytest.approx(0.081633, abs=1e-6)

  def test_semi_annual_is_annualized(self):
    """Annual rate is the periodic rate times two."""
    result = solve_ytm(1000.0, 25.0, 950.0, 20, 2)

    assert result.rate == pytest.approx(result.periodic_rate * 2)
    assert result.rate > 0.05

  def test_premium_bond_below_coupon(self):
    """Paying above par dilutes the yield below the coupon rate."""
    result = solve_ytm(1000.0, 80.0, 1100.0, 5, 1)

    assert 0 < result.rate < 0.08

  def test_round_trip(self):
    """Discounting the cash flows at the solved rate gives the price."""
    result = solve_ytm(1000.0, 25.0, 950.0, 20, 2)
    flows = [25.0] * 19 + [1025.0]

    assert present_value(flows, result.periodic_rate) == pytest.approx(
        950.0, abs=1e-6)

  def test_lower_price_higher_yield(self):
    """Deeper discount gives strictly larger yield."""
    rates = [solve_ytm(1000.0, 50.0, p, 10, 1).rate for p in (1050, 1000, 950,
                                                              900)]

    assert rates == sorted(rates)
    assert len(set(rates)) == 4

  def test_iteration_cap_returns_last_iterate(self):
    """One iteration is not enough; result is flagged unconverged."""
    result = solve_ytm(1000.0, 60.0, 980.0, 1, 1, max_iterations=1)

    assert isinstance(result, YtmSolution)
    assert not result.converged
    assert result.iterations == 1
    assert result.rate == pytest.approx(0.0816, abs=1e-3)

  def test_divergent_steps_restart(self):
    """Implied rate of -80% keeps overshooting below -1 and restarting.

    Initial guess (-1000 / 3000 = -1.33) is out of domain, so the solver
    starts at the restart rate. Each Newton step from 0.001 lands near -4
    and is reset, so the cap is hit at the restart rate.
    """
    result = solve_ytm(1000.0, 0.0, 5000.0, 1, 1)

    assert isinstance(result, YtmSolution)
    assert not result.converged
    assert result.iterations == 1000
    assert result.periodic_rate == 0.001

  def test_custom_restart_rate(self):
    """Restart rate is configurable."""
    result = solve_ytm(1000.0, 0.0, 5000.0, 1, 1, max_iterations=5,
                       restart_rate=0.002)

    assert result.periodic_rate == 0.002

  def test_derivative_zero(self, monkeypatch):
    """Zero derivative is returned as a failure outcome, not raised."""
    monkeypatch.setattr(ytm_module, 'price_and_derivative',
                        lambda *args: (900.0, 0.0))

    result = solve_ytm(1000.0, 50.0, 950.0, 10, 1)

    assert isinstance(result, DerivativeZero)
    assert result.iteration == 0
    assert result.periodic_rate == pytest.approx(55 / 975)
