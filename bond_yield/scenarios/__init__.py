"""Engine configuration and policy registry."""

from bond_yield.scenarios.config import EngineConfig
from bond_yield.scenarios.config import PRESETS
from bond_yield.scenarios.registry import create_policies
from bond_yield.scenarios.registry import list_policies
from bond_yield.scenarios.registry import POLICY_REGISTRY

__all__ = [
  'EngineConfig',
  'PRESETS',
  'POLICY_REGISTRY',
  'create_policies',
  'list_policies',
]
