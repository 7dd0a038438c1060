'''
Batch valuation for many bonds at once.

This module provides tools to:
1. Value every bond listed in a CSV (one bond per row)
2. Keep failed rows with their error message instead of aborting
3. Export results to CSV for further analysis

The input needs the columns faceValue, couponRate, marketPrice,
yearsToMaturity and couponFrequency. Other columns (e.g. an identifier)
are carried through to the output unchanged.

Usage (CLI):
  python -m bond_yield.analysis.batch_valuation \
    --input bonds.csv \
    --output results/bonds_valued.csv \
    --scenario lenient \
    --workers 4 \
    -v

Usage (Python API):
  import pandas as pd
  from bond_yield.analysis.batch_valuation import batch_valuation
  from bond_yield.scenarios.config import EngineConfig

  df = batch_valuation(pd.read_csv('bonds.csv'), EngineConfig.default())
  df.to_csv('results.csv', index=False)
'''

import argparse
from concurrent.futures import as_completed
from concurrent.futures import ThreadPoolExecutor
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd

from bond_yield.domain.errors import BondCalculationError
from bond_yield.engine.schedule import DateLike
from bond_yield.run import calculate
from bond_yield.scenarios.config import EngineConfig
from bond_yield.scenarios.config import PRESETS

logger = logging.getLogger(__name__)

INPUT_COLUMNS = [
    'faceValue',
    'couponRate',
    'marketPrice',
    'yearsToMaturity',
    'couponFrequency',
]

RESULT_COLUMNS = [
    'currentYield',
    'ytm',
    'totalInterest',
    'premiumOrDiscount',
    'periods',
    'iterations',
    'converged',
    'error',
]


def _value_row(
    record: Dict[str, Any],
    config: EngineConfig,
    anchor_date: Optional[DateLike],
) -> Dict[str, Any]:
  '''Value one input row, returning result columns (error set on failure).'''
  bond_record = {k: record[k] for k in INPUT_COLUMNS}
  try:
    result = calculate(bond_record, config=config, anchor_date=anchor_date)
  except BondCalculationError as e:
    return {
        **{c: None for c in RESULT_COLUMNS},
        'error': str(e),
    }

  return {
      'currentYield': result.current_yield,
      'ytm': result.ytm,
      'totalInterest': result.total_interest,
      'premiumOrDiscount': result.premium_or_discount.value,
      'periods': len(result.cash_flow_schedule),
      'iterations': result.diag.get('ytm_iterations'),
      'converged': result.diag.get('ytm_converged'),
      'error': None,
  }


def batch_valuation(
    bonds: pd.DataFrame,
    config: EngineConfig,
    anchor_date: Optional[DateLike] = None,
    max_workers: int = 1,
    verbose: bool = False,
) -> pd.DataFrame:
  '''
  Value every bond in a DataFrame.

  Args:
    bonds: One bond per row with the INPUT_COLUMNS
    config: EngineConfig with policy settings
    anchor_date: Schedule anchor date (default: config.anchor_date)
    max_workers: Thread pool size; 1 values rows sequentially
    verbose: Log every row

  Returns:
    DataFrame with the input columns followed by:
    - currentYield, ytm, totalInterest, premiumOrDiscount
    - periods: Length of the cash-flow schedule
    - iterations, converged: Solver diagnostics
    - error: Failure message, None for valued rows

  Raises:
    ValueError: If input columns are missing or every row failed
  '''
  missing = [c for c in INPUT_COLUMNS if c not in bonds.columns]
  if missing:
    raise ValueError(f'Missing input columns: {missing}')

  records = bonds.to_dict(orient='records')
  rows: List[Dict[str, Any]] = [{} for _ in records]

  if max_workers > 1:
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
      futures = {
          executor.submit(_value_row, record, config, anchor_date): i
          for i, record in enumerate(records)
      }
      for future in as_completed(futures):
        rows[futures[future]] = future.result()
  else:
    for i, record in enumerate(records):
      rows[i] = _value_row(record, config, anchor_date)

  for i, row in enumerate(rows, 1):
    if row['error']:
      logger.warning('Row %d failed: %s', i, row['error'])
    elif verbose:
      logger.info('[%d/%d] YTM: %.4f%%, CY: %.4f%%, %s', i, len(rows),
                  row['ytm'] * 100, row['currentYield'] * 100,
                  row['premiumOrDiscount'])

  results = pd.DataFrame(rows, columns=RESULT_COLUMNS, index=bonds.index)
  if results['error'].notna().all():
    raise ValueError(f'No successful results for any of {len(rows)} bonds')

  return pd.concat([bonds, results], axis=1)


def _print_summary(df: pd.DataFrame) -> None:
  '''Log summary statistics for batch valuation results.'''
  valued = df[df['error'].isna()]

  logger.info('')
  logger.info('=' * 70)
  logger.info('Summary Statistics')
  logger.info('=' * 70)
  logger.info('Total bonds: %d', len(df))
  logger.info('Valued: %d', len(valued))
  logger.info('Failed: %d', len(df) - len(valued))
  logger.info('')

  if not valued.empty:
    logger.info('Yield to Maturity:')
    logger.info('  Mean:   %.4f%%', valued['ytm'].mean() * 100)
    logger.info('  Median: %.4f%%', valued['ytm'].median() * 100)
    logger.info('  Min:    %.4f%%', valued['ytm'].min() * 100)
    logger.info('  Max:    %.4f%%', valued['ytm'].max() * 100)
    logger.info('')

    for label, count in valued['premiumOrDiscount'].value_counts().items():
      logger.info('%s: %d', label, count)

    not_converged = valued[~valued['converged'].astype(bool)]
    if not not_converged.empty:
      logger.info('Not converged: %d', len(not_converged))

  logger.info('=' * 70)


def main() -> None:
  '''CLI entrypoint for batch valuation.'''
  parser = argparse.ArgumentParser(
      description='Batch valuation for bonds listed in a CSV',
      formatter_class=argparse.RawDescriptionHelpFormatter,
      epilog=__doc__,
  )

  parser.add_argument('--input',
                      type=Path,
                      required=True,
                      help='Input CSV, one bond per row')

  parser.add_argument('--output',
                      type=Path,
                      required=True,
                      help='Output CSV file path')

  parser.add_argument('--scenario',
                      type=str,
                      default='default',
                      help='Engine config preset (default: default)')

  parser.add_argument('--anchor-date',
                      type=str,
                      help='Schedule anchor date (YYYY-MM-DD)')

  parser.add_argument('--workers',
                      type=int,
                      default=1,
                      help='Thread pool size (default: 1)')

  parser.add_argument('-v',
                      '--verbose',
                      action='store_true',
                      help='Verbose output')

  args = parser.parse_args()

  logging.basicConfig(
      level=logging.DEBUG if args.verbose else logging.INFO,
      format='%(asctime)s [%(levelname)s] %(message)s',
      datefmt='%Y-%m-%d %H:%M:%S',
  )

  try:
    if args.scenario not in PRESETS:
      available = ', '.join(PRESETS.keys())
      raise ValueError(
          f'Unknown scenario: {args.scenario}. Available: {available}')

    config = PRESETS[args.scenario]()
    logger.info('Using config: %s', config.name)

    bonds = pd.read_csv(args.input)
    logger.info('Loaded %d bonds from %s', len(bonds), args.input)

    results = batch_valuation(
        bonds=bonds,
        config=config,
        anchor_date=args.anchor_date,
        max_workers=args.workers,
        verbose=args.verbose,
    )
  except (FileNotFoundError, ValueError) as e:
    logger.error('Batch valuation failed: %s', e)
    raise SystemExit(1) from e

  args.output.parent.mkdir(parents=True, exist_ok=True)
  results.to_csv(args.output, index=False)

  logger.info('')
  logger.info('Saved %d results to %s', len(results), args.output)

  _print_summary(results)


if __name__ == '__main__':
  main()
