'''
Single-bond valuation entrypoint.

This module provides the main entry point for valuing a bond. It:
1. Validates the input and resolves the coupon period count
2. Computes current yield and solves for yield to maturity
3. Builds the cash-flow schedule and classifies the price
4. Rounds and returns a BondResult with diagnostics

Usage:
  from bond_yield.run import calculate
  from bond_yield.domain.types import BondInput, CouponFrequency

  result = calculate(BondInput(
    face_value=1000,
    coupon_rate=5,
    market_price=950,
    years_to_maturity=10,
    coupon_frequency=CouponFrequency.SEMI_ANNUAL,
  ))
  print(f"YTM: {result.ytm:.4%}")
'''

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from bond_yield.domain.errors import BondCalculationError
from bond_yield.domain.errors import DerivativeZeroError
from bond_yield.domain.types import BondInput
from bond_yield.domain.types import BondResult
from bond_yield.domain.types import CouponFrequency
from bond_yield.domain.types import DerivativeZero
from bond_yield.domain.validation import validate_bond_input
from bond_yield.engine.metrics import classify_premium_discount
from bond_yield.engine.metrics import current_yield
from bond_yield.engine.metrics import total_interest
from bond_yield.engine.rounding import round_currency
from bond_yield.engine.rounding import round_yield
from bond_yield.engine.schedule import DateLike
from bond_yield.engine.schedule import generate_cash_flow_schedule
from bond_yield.engine.ytm import solve_ytm
from bond_yield.scenarios.config import EngineConfig
from bond_yield.scenarios.config import PRESETS
from bond_yield.scenarios.registry import create_policies

logger = logging.getLogger(__name__)


def calculate(
    bond: Union[BondInput, Mapping[str, Any]],
    config: Optional[EngineConfig] = None,
    anchor_date: Optional[DateLike] = None,
) -> BondResult:
  '''
  Value a single bond.

  Args:
    bond: BondInput, or a wire record with camelCase keys
    config: EngineConfig (default: EngineConfig.default())
    anchor_date: Settlement date the schedule counts from
      (default: config.anchor_date)

  Returns:
    BondResult with rounded yields, total interest, classification,
    schedule and diagnostics

  Raises:
    InvalidInputError: If the input violates a precondition or the
      period-count policy rejects it
    DerivativeZeroError: If the solver derivative vanished
    NonConvergenceError: Under the strict convergence policy only
  '''
  if config is None:
    config = EngineConfig.default()

  if not isinstance(bond, BondInput):
    bond = BondInput.from_dict(bond)
  validate_bond_input(bond)

  policies = create_policies(config)
  periods_per_year = bond.periods_per_year
  all_diag: Dict[str, Any] = {'config': config.name}

  periods_result = policies['periods'].compute(bond.years_to_maturity,
                                               periods_per_year)
  all_diag.update({f'periods_{k}': v for k, v in periods_result.diag.items()})
  total_periods = periods_result.value

  coupon_payment = bond.coupon_payment

  yield_now = current_yield(bond.face_value, bond.coupon_rate,
                            bond.market_price)

  outcome = solve_ytm(
      face_value=bond.face_value,
      coupon_payment=coupon_payment,
      market_price=bond.market_price,
      total_periods=total_periods,
      periods_per_year=periods_per_year,
      max_iterations=config.max_iterations,
      tolerance=config.tolerance,
      restart_rate=config.restart_rate,
  )
  if isinstance(outcome, DerivativeZero):
    raise DerivativeZeroError(outcome.periodic_rate, outcome.iteration)

  ytm_result = policies['convergence'].compute(outcome)
  all_diag.update({f'ytm_{k}': v for k, v in ytm_result.diag.items()})
  all_diag['ytm_periodic_rate'] = outcome.periodic_rate

  schedule = generate_cash_flow_schedule(
      face_value=bond.face_value,
      coupon_payment=coupon_payment,
      total_periods=total_periods,
      periods_per_year=periods_per_year,
      anchor_date=anchor_date if anchor_date is not None else config.anchor,
  )

  return BondResult(
      current_yield=round_yield(yield_now),
      ytm=round_yield(ytm_result.value),
      total_interest=round_currency(total_interest(coupon_payment,
                                                   total_periods)),
      premium_or_discount=classify_premium_discount(bond.market_price,
                                                    bond.face_value),
      cash_flow_schedule=tuple(schedule),
      diag=all_diag,
  )


def _load_config(args: argparse.Namespace) -> EngineConfig:
  if args.config:
    return EngineConfig.from_json(Path(args.config).read_text(encoding='utf-8'))
  return PRESETS[args.scenario]()


def main() -> None:
  '''CLI entrypoint.'''
  parser = argparse.ArgumentParser(description='Bond yield calculator')
  parser.add_argument('--face-value', type=float, required=True,
                      help='Par value repaid at maturity')
  parser.add_argument('--coupon-rate', type=float, required=True,
                      help='Annual coupon rate in percent (5 means 5%%)')
  parser.add_argument('--market-price', type=float, required=True,
                      help='Current market price')
  parser.add_argument('--years', type=float, required=True,
                      help='Years to maturity')
  parser.add_argument('--frequency',
                      type=str,
                      default=CouponFrequency.ANNUAL.value,
                      choices=[f.value for f in CouponFrequency],
                      help='Coupon frequency')
  parser.add_argument('--scenario',
                      type=str,
                      default='default',
                      choices=sorted(PRESETS),
                      help='Engine config preset')
  parser.add_argument('--config', type=Path,
                      help='EngineConfig JSON file (overrides --scenario)')
  parser.add_argument('--anchor-date', type=str,
                      help='Schedule anchor date (YYYY-MM-DD)')
  parser.add_argument('--json', action='store_true',
                      help='Print the result record as JSON')
  parser.add_argument('-v', '--verbose', action='store_true',
                      help='Verbose output')
  args = parser.parse_args()

  logging.basicConfig(
      level=logging.DEBUG if args.verbose else logging.INFO,
      format='%(asctime)s [%(levelname)s] %(message)s',
      datefmt='%Y-%m-%d %H:%M:%S',
  )

  bond = BondInput(
      face_value=args.face_value,
      coupon_rate=args.coupon_rate,
      market_price=args.market_price,
      years_to_maturity=args.years,
      coupon_frequency=CouponFrequency(args.frequency),
  )

  try:
    config = _load_config(args)
    result = calculate(bond, config=config, anchor_date=args.anchor_date)
  except (BondCalculationError, FileNotFoundError, KeyError, ValueError) as e:
    logger.error('Calculation failed: %s', e)
    raise SystemExit(1) from e

  if args.json:
    print(json.dumps(result.to_dict(), indent=2))
    return

  separator = '=' * 70
  logger.info(separator)
  logger.info('Bond Valuation - config: %s', config.name)
  logger.info(separator)
  logger.info('  Current Yield: %.4f%%', result.current_yield * 100)
  logger.info('  YTM: %.4f%%', result.ytm * 100)
  logger.info('  Total Interest: $%s', f'{result.total_interest:,.2f}')
  logger.info('  Classification: %s', result.premium_or_discount.value)
  logger.info('  Iterations: %s (converged: %s)',
              result.diag.get('ytm_iterations'),
              result.diag.get('ytm_converged'))
  logger.info('\nCash-flow schedule:\n%s',
              result.schedule_frame().to_string())
  logger.info(separator)


if __name__ == '__main__':
  main()
