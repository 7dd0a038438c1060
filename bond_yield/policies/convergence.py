"""
Convergence policies.

These policies decide what happens when the YTM solver reaches its
iteration cap without meeting the price tolerance.
"""

from abc import ABC
from abc import abstractmethod
import logging

from bond_yield.domain.errors import NonConvergenceError
from bond_yield.domain.types import PolicyOutput
from bond_yield.domain.types import YtmSolution

logger = logging.getLogger(__name__)


class ConvergencePolicy(ABC):
  """
  Base class for convergence policies.

  Subclasses implement compute() to accept or reject a solver solution.
  """

  @abstractmethod
  def compute(self, solution: YtmSolution) -> PolicyOutput[float]:
    """
    Resolve the annualized rate to report.

    Args:
      solution: Solver output, converged or not

    Returns:
      PolicyOutput with the annualized rate and diagnostics
    """


class BestEffort(ConvergencePolicy):
  """Return the last iterate, logging a warning if it did not converge."""

  def compute(self, solution: YtmSolution) -> PolicyOutput[float]:
    if not solution.converged:
      logger.warning(
          'YTM did not converge after %d iterations, returning r=%.10f',
          solution.iterations, solution.periodic_rate)
    return PolicyOutput(value=solution.rate,
                        diag={
                            'convergence_method': 'best_effort',
                            'converged': solution.converged,
                            'iterations': solution.iterations,
                        })


class StrictConvergence(ConvergencePolicy):
  """Raise NonConvergenceError unless the solver met its tolerance."""

  def compute(self, solution: YtmSolution) -> PolicyOutput[float]:
    if not solution.converged:
      raise NonConvergenceError(solution.periodic_rate, solution.iterations)
    return PolicyOutput(value=solution.rate,
                        diag={
                            'convergence_method': 'strict',
                            'converged': True,
                            'iterations': solution.iterations,
                        })
