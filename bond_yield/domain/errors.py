'''Error taxonomy for the bond yield engine.'''

from typing import List, Optional


class BondCalculationError(Exception):
  '''Base class for all errors raised by the engine.'''


class InvalidInputError(BondCalculationError, ValueError):
  '''
  Bond input violates a precondition.

  Attributes:
    violations: Individual problems found, one message per field
  '''

  def __init__(self, message: str, violations: Optional[List[str]] = None):
    super().__init__(message)
    self.violations = list(violations or [])


class DerivativeZeroError(BondCalculationError):
  '''
  Newton-Raphson derivative evaluated to exactly zero.

  The iteration is deterministic, so retrying with identical inputs
  reproduces the failure.

  Attributes:
    periodic_rate: Periodic rate at which the derivative vanished
    iteration: Zero-based iteration index
  '''

  def __init__(self, periodic_rate: float, iteration: int):
    super().__init__('YTM calculation failed: derivative is zero '
                     f'(r={periodic_rate!r}, iteration={iteration}).')
    self.periodic_rate = periodic_rate
    self.iteration = iteration


class NonConvergenceError(BondCalculationError):
  '''
  Solver exhausted its iteration cap without meeting the tolerance.

  Only raised under the strict convergence policy.
  '''

  def __init__(self, periodic_rate: float, iterations: int):
    super().__init__(f'YTM did not converge after {iterations} iterations '
                     f'(last r={periodic_rate!r}).')
    self.periodic_rate = periodic_rate
    self.iterations = iterations
