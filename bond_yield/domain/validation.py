"""
Precondition checks for bond inputs.

The request layer is expected to validate before calling the engine; these
checks let the engine fail fast instead of producing non-finite output.
"""
from typing import List

from bond_yield.domain.checks import CheckResult
from bond_yield.domain.checks import failed
from bond_yield.domain.checks import passed
from bond_yield.domain.errors import InvalidInputError
from bond_yield.domain.types import BondInput
from bond_yield.domain.types import CouponFrequency
from bond_yield.domain.types import is_finite_number


def _check_number(name: str, value: float, allow_zero: bool) -> CheckResult:
  if not is_finite_number(value):
    return failed(name, f'must be a finite number, got {value!r}')
  if allow_zero and value < 0:
    return failed(name, f'must be >= 0, got {value!r}')
  if not allow_zero and value <= 0:
    return failed(name, f'must be > 0, got {value!r}')
  return passed(name)


def check_bond_input(bond: BondInput) -> List[CheckResult]:
  """
  Run every precondition check on a bond.

  Checks:
  1. faceValue, marketPrice, yearsToMaturity finite and positive
  2. couponRate finite and non-negative
  3. couponFrequency is a known frequency
  """
  results = [
      _check_number('faceValue', bond.face_value, allow_zero=False),
      _check_number('couponRate', bond.coupon_rate, allow_zero=True),
      _check_number('marketPrice', bond.market_price, allow_zero=False),
      _check_number('yearsToMaturity',
                    bond.years_to_maturity,
                    allow_zero=False),
  ]
  if isinstance(bond.coupon_frequency, CouponFrequency):
    results.append(passed('couponFrequency'))
  else:
    results.append(
        failed('couponFrequency',
               f'must be annual or semi-annual, '
               f'got {bond.coupon_frequency!r}'))
  return results


def validate_bond_input(bond: BondInput) -> None:
  """
  Raise if any precondition check fails.

  Raises:
    InvalidInputError: With one violation message per failed check
  """
  failures = [r for r in check_bond_input(bond) if not r.ok]
  if failures:
    violations = [r.violation for r in failures]
    raise InvalidInputError('Invalid bond input: ' + '; '.join(violations),
                            violations)
