import datetime as dt

import pytest

from bond_yield.policies.convergence import BestEffort
from bond_yield.policies.convergence import StrictConvergence
from bond_yield.policies.periods import FloorPeriods
from bond_yield.policies.periods import RejectFractional
from bond_yield.scenarios.config import EngineConfig
from bond_yield.scenarios.config import PRESETS
from bond_yield.scenarios.registry import create_policies
from bond_yield.scenarios.registry import list_policies


class TestEngineConfig:
  """Tests for EngineConfig."""

  def test_default_values(self):
    """Solver constants and anchor date defaults."""
    config = EngineConfig.default()

    assert config.name == 'default'
    assert config.periods == 'reject'
    assert config.convergence == 'best_effort'
    assert config.max_iterations == 1000
    assert config.tolerance == 1e-6
    assert config.restart_rate == 0.001
    assert config.anchor == dt.date(2026, 2, 23)

  def test_presets(self):
    """Named presets pick the expected policies."""
    assert EngineConfig.strict().convergence == 'strict'
    assert EngineConfig.lenient().periods == 'floor'
    assert set(PRESETS) == {'default', 'strict', 'lenient'}

  def test_json_round_trip(self):
    """Config survives JSON serialization."""
    config = EngineConfig(name='custom', periods='round', tolerance=1e-8,
                          anchor_date='2025-01-31')

    restored = EngineConfig.from_json(config.to_json())

    assert restored == config
    assert restored.anchor == dt.date(2025, 1, 31)

  def test_from_dict_unknown_key(self):
    """Unknown keys are a TypeError from the dataclass constructor."""
    with pytest.raises(TypeError):
      EngineConfig.from_dict({'n_years': 10})


class TestRegistry:
  """Tests for create_policies and list_policies."""

  def test_default_policies(self):
    policies = create_policies(EngineConfig.default())

    assert isinstance(policies['periods'], RejectFractional)
    assert isinstance(policies['convergence'], BestEffort)

  def test_lenient_and_strict(self):
    assert isinstance(create_policies(EngineConfig.lenient())['periods'],
                      FloorPeriods)
    assert isinstance(create_policies(EngineConfig.strict())['convergence'],
                      StrictConvergence)

  def test_unknown_policy(self):
    """Unknown names list the available ones."""
    with pytest.raises(KeyError, match="Unknown periods policy: 'ceil'"):
      create_policies(EngineConfig(periods='ceil'))

    with pytest.raises(KeyError, match='Available'):
      create_policies(EngineConfig(convergence='retry'))

  def test_list_policies(self):
    assert list_policies() == {
        'periods': ['reject', 'floor', 'round'],
        'convergence': ['best_effort', 'strict'],
    }
