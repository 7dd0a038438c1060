import logging

import pytest

from bond_yield.domain.errors import NonConvergenceError
from bond_yield.domain.types import YtmSolution
from bond_yield.policies.convergence import BestEffort
from bond_yield.policies.convergence import StrictConvergence

CONVERGED = YtmSolution(rate=0.05, periodic_rate=0.05, iterations=3)
CAPPED = YtmSolution(rate=0.002,
                     periodic_rate=0.001,
                     iterations=1000,
                     converged=False)


class TestBestEffort:
  """Tests for BestEffort convergence policy."""

  def test_converged(self):
    """Converged rate is returned as is."""
    result = BestEffort().compute(CONVERGED)

    assert result.value == 0.05
    assert result.diag == {
        'convergence_method': 'best_effort',
        'converged': True,
        'iterations': 3,
    }

  def test_not_converged_warns(self, caplog):
    """Last iterate is returned with a warning."""
    with caplog.at_level(logging.WARNING):
      result = BestEffort().compute(CAPPED)

    assert result.value == 0.002
    assert result.diag['converged'] is False
    assert 'did not converge after 1000 iterations' in caplog.text


class TestStrictConvergence:
  """Tests for StrictConvergence policy."""

  def test_converged(self):
    """Converged rate is returned as is."""
    result = StrictConvergence().compute(CONVERGED)

    assert result.value == 0.05
    assert result.diag['convergence_method'] == 'strict'

  def test_not_converged_raises(self):
    """Capped solution is an error."""
    with pytest.raises(NonConvergenceError, match='after 1000 iterations') as e:
      StrictConvergence().compute(CAPPED)

    assert e.value.periodic_rate == 0.001
    assert e.value.iterations == 1000
