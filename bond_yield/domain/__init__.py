"""Domain types for the bond yield engine."""

from bond_yield.domain.errors import BondCalculationError
from bond_yield.domain.errors import DerivativeZeroError
from bond_yield.domain.errors import InvalidInputError
from bond_yield.domain.errors import NonConvergenceError
from bond_yield.domain.types import BondInput
from bond_yield.domain.types import BondResult
from bond_yield.domain.types import CashFlowPeriod
from bond_yield.domain.types import CouponFrequency
from bond_yield.domain.types import DerivativeZero
from bond_yield.domain.types import PolicyOutput
from bond_yield.domain.types import PremiumOrDiscount
from bond_yield.domain.types import SolverOutcome
from bond_yield.domain.types import YtmSolution

__all__ = [
    'BondInput',
    'BondResult',
    'CashFlowPeriod',
    'CouponFrequency',
    'PremiumOrDiscount',
    'PolicyOutput',
    'YtmSolution',
    'DerivativeZero',
    'SolverOutcome',
    'BondCalculationError',
    'InvalidInputError',
    'DerivativeZeroError',
    'NonConvergenceError',
]
