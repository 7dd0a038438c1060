"""
Yield-to-maturity solver.

Newton-Raphson on the periodic discount rate, seeded with the textbook
approximation formula and annualized at the end. The solver does not raise
on a vanishing derivative; it returns a DerivativeZero outcome and leaves
the decision to the caller.
"""

import logging
import math

from bond_yield.domain.types import DerivativeZero
from bond_yield.domain.types import SolverOutcome
from bond_yield.domain.types import YtmSolution
from bond_yield.engine.pricing import price_and_derivative

logger = logging.getLogger(__name__)

MAX_ITERATIONS = 1000
TOLERANCE = 1e-6
RESTART_RATE = 0.001


def initial_guess(
    face_value: float,
    coupon_payment: float,
    market_price: float,
    total_periods: int,
    periods_per_year: int,
) -> float:
  """
  Approximate periodic YTM used to seed the iteration.

    approx = (C*m + (F - P) / (n / m)) / ((F + P) / 2)

  Returns:
    approx / m, the per-period rate
  """
  years = total_periods / periods_per_year
  approx_annual = ((coupon_payment * periods_per_year +
                    (face_value - market_price) / years) /
                   ((face_value + market_price) / 2))
  return approx_annual / periods_per_year


def _needs_restart(rate: float) -> bool:
  return not math.isfinite(rate) or rate <= -1


def solve_ytm(
    face_value: float,
    coupon_payment: float,
    market_price: float,
    total_periods: int,
    periods_per_year: int,
    max_iterations: int = MAX_ITERATIONS,
    tolerance: float = TOLERANCE,
    restart_rate: float = RESTART_RATE,
) -> SolverOutcome:
  """
  Solve for the annualized rate that prices the bond at market_price.

  Args:
    face_value: Redemption amount
    coupon_payment: Cash coupon per period
    market_price: Target present value
    total_periods: Number of coupon periods
    periods_per_year: 1 (annual) or 2 (semi-annual)
    max_iterations: Newton-Raphson iteration cap
    tolerance: Accept when |price - market_price| < tolerance
    restart_rate: Periodic rate to restart from when a step diverges

  Returns:
    YtmSolution (converged or best effort after the cap), or
    DerivativeZero if the derivative vanished mid-iteration
  """
  if coupon_payment == 0 and face_value == market_price:
    return YtmSolution(rate=0.0, periodic_rate=0.0, iterations=0)

  r = initial_guess(face_value, coupon_payment, market_price, total_periods,
                    periods_per_year)
  if _needs_restart(r):
    logger.debug('Initial guess %r outside domain, restarting at %r', r,
                 restart_rate)
    r = restart_rate

  restarts = 0
  for i in range(max_iterations):
    price, derivative = price_and_derivative(face_value, coupon_payment, r,
                                             total_periods)
    diff = price - market_price

    if abs(diff) < tolerance:
      logger.debug('YTM converged in %d iterations (r=%.10f, restarts=%d)',
                   i + 1, r, restarts)
      return YtmSolution(rate=r * periods_per_year,
                         periodic_rate=r,
                         iterations=i + 1)

    if derivative == 0:
      return DerivativeZero(periodic_rate=r, iteration=i)

    r = r - diff / derivative

    if _needs_restart(r):
      restarts += 1
      r = restart_rate

  logger.debug('YTM hit iteration cap %d (r=%.10f, restarts=%d)',
               max_iterations, r, restarts)
  return YtmSolution(rate=r * periods_per_year,
                     periodic_rate=r,
                     iterations=max_iterations,
                     converged=False)
