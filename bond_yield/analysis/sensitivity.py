"""
Yield sensitivity analysis.

This module builds 2D tables showing how yield to maturity varies across
market prices and years to maturity for a bond with a fixed face value,
coupon rate and frequency.

CLI Usage:
  python -m bond_yield.analysis.sensitivity \\
      --face-value 1000 --coupon-rate 5 --frequency semi-annual \\
      --prices 900,950,1000,1050 \\
      --years 2,5,10,30
"""

import argparse
import logging
from pathlib import Path
from typing import Optional

import pandas as pd

from bond_yield.domain.errors import BondCalculationError
from bond_yield.domain.types import BondInput
from bond_yield.domain.types import CouponFrequency
from bond_yield.run import calculate
from bond_yield.scenarios.config import EngineConfig
from bond_yield.scenarios.config import PRESETS

logger = logging.getLogger(__name__)


class YtmSensitivityBuilder:
  """
  Build 2D yield-to-maturity tables.

  Varies market price and years to maturity while keeping face value,
  coupon rate and coupon frequency fixed.
  """

  def __init__(
      self,
      face_value: float,
      coupon_rate: float,
      coupon_frequency: CouponFrequency = CouponFrequency.ANNUAL,
      config: Optional[EngineConfig] = None,
  ):
    """
    Initialize sensitivity table builder.

    Args:
        face_value: Par value
        coupon_rate: Annual coupon rate in percent
        coupon_frequency: Annual or semi-annual coupons
        config: EngineConfig for every cell (default: EngineConfig.default())
    """
    self.face_value = face_value
    self.coupon_rate = coupon_rate
    self.coupon_frequency = coupon_frequency
    self.config = config or EngineConfig.default()

  def _ytm(self, market_price: float, years: float) -> float:
    bond = BondInput(
        face_value=self.face_value,
        coupon_rate=self.coupon_rate,
        market_price=market_price,
        years_to_maturity=years,
        coupon_frequency=self.coupon_frequency,
    )
    try:
      return calculate(bond, config=self.config).ytm
    except BondCalculationError as e:
      logger.warning('No YTM for price=%s, years=%s: %s', market_price, years,
                     e)
      return float('nan')

  def build(
      self,
      market_prices: list[float],
      years: list[float],
  ) -> pd.DataFrame:
    """
    Build 2D sensitivity table.

    Args:
        market_prices: Market prices (e.g., [950, 1000, 1050])
        years: Years to maturity (e.g., [2, 5, 10])

    Returns:
        DataFrame with market prices as index, years as columns, and
        rounded annualized YTMs as cell values (NaN where the engine
        rejected the combination)
    """
    if len(market_prices) == 0:
      raise ValueError('market_prices cannot be empty')
    if len(years) == 0:
      raise ValueError('years cannot be empty')

    logger.info('Building sensitivity table: %d x %d', len(market_prices),
                len(years))

    data_rows = [[self._ytm(p, y) for y in years] for p in market_prices]

    df = pd.DataFrame(data_rows,
                      index=[f'{p:,.2f}' for p in market_prices],
                      columns=[f'{y:g}y' for y in years])
    df.index.name = 'Market Price'
    df.columns.name = 'Years to Maturity'

    logger.info('Sensitivity table built successfully')
    return df


def _parse_float_list(s: str) -> list[float]:
  """Parse comma-separated float list."""
  return [float(x.strip()) for x in s.split(',')]


def _frange(start: float, stop: float, step: float) -> list[float]:
  """
  Inclusive float range with rounding.

  Args:
      start: Start value
      stop: Stop value (inclusive)
      step: Step size

  Returns:
      List of floats from start to stop (inclusive)
  """
  if step <= 0:
    raise ValueError('step must be > 0')
  n = int(round((stop - start) / step))
  if n < 0:
    return []
  return [round(start + k * step, 12) for k in range(n + 1)]


def main() -> None:
  """CLI entrypoint for sensitivity analysis."""
  parser = argparse.ArgumentParser(
      description='YTM Sensitivity Analysis',
      formatter_class=argparse.RawDescriptionHelpFormatter,
      epilog="""
Examples:
  # Explicit lists
  python -m bond_yield.analysis.sensitivity \\
      --face-value 1000 --coupon-rate 5 \\
      --prices 900,950,1000,1050 --years 2,5,10

  # Range specification
  python -m bond_yield.analysis.sensitivity \\
      --face-value 1000 --coupon-rate 6 --frequency semi-annual \\
      --price-min 900 --price-max 1100 --price-step 25 \\
      --years 1,3,5,10,30
      """)

  parser.add_argument('--face-value', type=float, required=True,
                      help='Par value')
  parser.add_argument('--coupon-rate', type=float, required=True,
                      help='Annual coupon rate in percent')
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

  # Option 1: Explicit list
  parser.add_argument('--prices',
                      type=str,
                      help='Comma-separated market prices (e.g., 950,1000)')

  # Option 2: Range specification
  parser.add_argument('--price-min', type=float, help='Minimum market price')
  parser.add_argument('--price-max', type=float, help='Maximum market price')
  parser.add_argument('--price-step',
                      type=float,
                      default=10.0,
                      help='Market price step (default: 10)')

  parser.add_argument('--years',
                      type=str,
                      default='1,2,5,10,20,30',
                      help='Comma-separated years to maturity')

  parser.add_argument('--output', type=Path, help='Output CSV path (optional)')

  parser.add_argument('--verbose',
                      '-v',
                      action='store_true',
                      help='Verbose output')

  args = parser.parse_args()

  logging.basicConfig(
      level=logging.DEBUG if args.verbose else logging.INFO,
      format='%(asctime)s [%(levelname)s] %(message)s',
      datefmt='%Y-%m-%d %H:%M:%S',
  )

  config = PRESETS[args.scenario]()
  logger.info('Using config: %s', config.name)

  if args.prices:
    prices = _parse_float_list(args.prices)
  elif args.price_min is not None and args.price_max is not None:
    prices = _frange(args.price_min, args.price_max, args.price_step)
  else:
    prices = [args.face_value * f for f in (0.9, 0.95, 1.0, 1.05, 1.1)]
    logger.warning('No market prices specified, using default: %s', prices)

  years = _parse_float_list(args.years)

  builder = YtmSensitivityBuilder(
      face_value=args.face_value,
      coupon_rate=args.coupon_rate,
      coupon_frequency=CouponFrequency(args.frequency),
      config=config,
  )

  logger.info('Building sensitivity table...')
  table = builder.build(market_prices=prices, years=years)

  print('\n' + '=' * 80)
  print(f'YTM Sensitivity: face {args.face_value:,.2f}, '
        f'coupon {args.coupon_rate:g}% {args.frequency}')
  print('=' * 80)
  print(table.to_string(float_format=lambda x: f'{x * 100:.4f}%'))
  print('=' * 80 + '\n')

  if args.output:
    table.to_csv(args.output)
    logger.info('Saved to: %s', args.output)


if __name__ == '__main__':
  main()
