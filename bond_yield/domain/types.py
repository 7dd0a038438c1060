'''
Domain types for the bond yield engine.

These dataclasses are the value objects passed between the engine
components. The wire format (camelCase keys, ISO dates, enum strings) is
produced and consumed only here, so the engine itself never deals with
raw records.
'''

import datetime as dt
import math
import numbers
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Generic, Mapping, Sequence, Tuple, TypeVar, Union

import pandas as pd

from bond_yield.domain.errors import InvalidInputError

T = TypeVar('T')


@dataclass
class PolicyOutput(Generic[T]):
  '''
  Standard output from any policy.

  Attributes:
    value: The computed value (type depends on policy)
    diag: Dictionary of diagnostic information
  '''
  value: T
  diag: Dict[str, Any] = field(default_factory=dict)


class CouponFrequency(str, Enum):
  '''How often coupons are paid.'''
  ANNUAL = 'annual'
  SEMI_ANNUAL = 'semi-annual'

  @property
  def periods_per_year(self) -> int:
    return 2 if self is CouponFrequency.SEMI_ANNUAL else 1


class PremiumOrDiscount(str, Enum):
  '''Where the market price sits relative to face value.'''
  PREMIUM = 'Premium'
  DISCOUNT = 'Discount'
  PAR = 'Par'


# Wire key -> dataclass field
_INPUT_KEYS = {
    'faceValue': 'face_value',
    'couponRate': 'coupon_rate',
    'marketPrice': 'market_price',
    'yearsToMaturity': 'years_to_maturity',
    'couponFrequency': 'coupon_frequency',
}


def _is_real(value: Any) -> bool:
  return (isinstance(value, (numbers.Real, Decimal)) and
          not isinstance(value, bool))


def _to_float(name: str, raw: Any) -> float:
  if isinstance(raw, bool):
    raise InvalidInputError(f'{name} must be a number, got {raw!r}',
                            [f'{name}: not a number'])
  try:
    return float(raw)
  except (TypeError, ValueError) as e:
    raise InvalidInputError(f'{name} must be a number, got {raw!r}',
                            [f'{name}: not a number']) from e


@dataclass(frozen=True)
class BondInput:
  '''
  Caller-supplied bond description.

  Attributes:
    face_value: Principal repaid at maturity
    coupon_rate: Annual coupon rate in percent (5 means 5%)
    market_price: Current trading price, the present-value target
    years_to_maturity: Remaining life in years
    coupon_frequency: Annual or semi-annual coupons
  '''
  face_value: float
  coupon_rate: float
  market_price: float
  years_to_maturity: float
  coupon_frequency: CouponFrequency = CouponFrequency.ANNUAL

  def __post_init__(self):
    # Other real types (numpy scalars, Fraction, Decimal) become float
    for name in _INPUT_KEYS.values():
      value = getattr(self, name)
      if _is_real(value) and not isinstance(value, float):
        object.__setattr__(self, name, float(value))

  @property
  def periods_per_year(self) -> int:
    return self.coupon_frequency.periods_per_year

  @property
  def raw_periods(self) -> float:
    '''Unresolved period count, possibly fractional.'''
    return self.years_to_maturity * self.periods_per_year

  @property
  def coupon_payment(self) -> float:
    '''Fixed cash coupon paid each period.'''
    return (self.coupon_rate / 100 / self.periods_per_year) * self.face_value

  @classmethod
  def from_dict(cls, data: Mapping[str, Any]) -> 'BondInput':
    '''
    Build a BondInput from a wire record.

    Accepts the camelCase keys of the request body as well as the
    dataclass field names. Unknown keys are rejected.

    Args:
      data: Mapping with faceValue, couponRate, marketPrice,
        yearsToMaturity and couponFrequency

    Returns:
      BondInput with numeric fields converted to float

    Raises:
      InvalidInputError: On missing, unknown or malformed fields
    '''
    known = set(_INPUT_KEYS) | set(_INPUT_KEYS.values())
    unknown = sorted(k for k in data if k not in known)
    if unknown:
      raise InvalidInputError(f'Unknown fields: {", ".join(unknown)}',
                              [f'{k}: not allowed' for k in unknown])

    values: Dict[str, Any] = {}
    for wire_key, attr in _INPUT_KEYS.items():
      if wire_key in data:
        values[attr] = data[wire_key]
      elif attr in data:
        values[attr] = data[attr]

    missing = [k for k, attr in _INPUT_KEYS.items() if attr not in values]
    if missing:
      raise InvalidInputError(f'Missing fields: {", ".join(missing)}',
                              [f'{k}: required' for k in missing])

    frequency = values['coupon_frequency']
    if not isinstance(frequency, CouponFrequency):
      try:
        frequency = CouponFrequency(frequency)
      except (TypeError, ValueError) as e:
        raise InvalidInputError(
            f'couponFrequency must be one of '
            f'{[f.value for f in CouponFrequency]}, got {frequency!r}',
            ['couponFrequency: invalid']) from e

    return cls(
        face_value=_to_float('faceValue', values['face_value']),
        coupon_rate=_to_float('couponRate', values['coupon_rate']),
        market_price=_to_float('marketPrice', values['market_price']),
        years_to_maturity=_to_float('yearsToMaturity',
                                    values['years_to_maturity']),
        coupon_frequency=frequency,
    )

  def to_dict(self) -> Dict[str, Any]:
    '''Convert to the camelCase wire record.'''
    return {
        'faceValue': self.face_value,
        'couponRate': self.coupon_rate,
        'marketPrice': self.market_price,
        'yearsToMaturity': self.years_to_maturity,
        'couponFrequency': self.coupon_frequency.value,
    }


@dataclass(frozen=True)
class CashFlowPeriod:
  '''
  One coupon period of the cash-flow schedule.

  Currency fields are already rounded to cents.
  '''
  period: int
  payment_date: dt.date
  coupon_payment: float
  principal_payment: float
  total_payment: float
  cumulative_interest: float
  remaining_principal: float

  def to_dict(self) -> Dict[str, Any]:
    return {
        'period': self.period,
        'paymentDate': self.payment_date.isoformat(),
        'couponPayment': self.coupon_payment,
        'principalPayment': self.principal_payment,
        'totalPayment': self.total_payment,
        'cumulativeInterest': self.cumulative_interest,
        'remainingPrincipal': self.remaining_principal,
    }


def schedule_to_frame(schedule: Sequence[CashFlowPeriod]) -> pd.DataFrame:
  '''
  Tabulate a cash-flow schedule.

  Returns:
    DataFrame indexed by period with paymentDate as datetime64 and one
    column per currency field
  '''
  columns = [
      'period', 'paymentDate', 'couponPayment', 'principalPayment',
      'totalPayment', 'cumulativeInterest', 'remainingPrincipal'
  ]
  df = pd.DataFrame([p.to_dict() for p in schedule], columns=columns)
  df['paymentDate'] = pd.to_datetime(df['paymentDate'])
  return df.set_index('period')


@dataclass
class BondResult:
  '''
  Complete valuation result.

  Attributes:
    current_yield: Annual coupon / market price, 6 decimals
    ytm: Annualized yield to maturity, 6 decimals
    total_interest: Sum of all coupons, 2 decimals
    premium_or_discount: Classification against face value
    cash_flow_schedule: One entry per coupon period
    diag: Solver and policy diagnostics (not part of the wire record)
  '''
  current_yield: float
  ytm: float
  total_interest: float
  premium_or_discount: PremiumOrDiscount
  cash_flow_schedule: Tuple[CashFlowPeriod, ...]
  diag: Dict[str, Any] = field(default_factory=dict)

  def to_dict(self) -> Dict[str, Any]:
    '''Convert to the camelCase wire record.'''
    return {
        'currentYield': self.current_yield,
        'ytm': self.ytm,
        'totalInterest': self.total_interest,
        'premiumOrDiscount': self.premium_or_discount.value,
        'cashFlowSchedule': [p.to_dict() for p in self.cash_flow_schedule],
    }

  def schedule_frame(self) -> pd.DataFrame:
    return schedule_to_frame(self.cash_flow_schedule)


@dataclass(frozen=True)
class YtmSolution:
  '''
  Successful solver outcome.

  Attributes:
    rate: Annualized rate (periodic rate x periods per year)
    periodic_rate: Rate per coupon period
    iterations: Newton-Raphson steps evaluated
    converged: False if the iteration cap was hit before tolerance
  '''
  rate: float
  periodic_rate: float
  iterations: int
  converged: bool = True


@dataclass(frozen=True)
class DerivativeZero:
  '''Solver failure: price derivative vanished at periodic_rate.'''
  periodic_rate: float
  iteration: int


SolverOutcome = Union[YtmSolution, DerivativeZero]


def is_finite_number(value: float) -> bool:
  return _is_real(value) and math.isfinite(value)
