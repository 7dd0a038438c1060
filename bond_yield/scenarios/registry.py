"""
Policy registry for mapping string names to policy factories.

This lets EngineConfig name policies with plain strings (JSON friendly)
while still instantiating the correct policy classes.

To add a new policy:
1. Implement the policy class in the appropriate module
   (e.g., policies/periods.py)
2. Register a factory in the matching dictionary below

Example:
  PERIOD_POLICIES['ceil'] = CeilPeriods
"""

from collections.abc import Callable
from typing import Any, cast

from bond_yield.policies.convergence import BestEffort
from bond_yield.policies.convergence import ConvergencePolicy
from bond_yield.policies.convergence import StrictConvergence
from bond_yield.policies.periods import FloorPeriods
from bond_yield.policies.periods import PeriodCountPolicy
from bond_yield.policies.periods import RejectFractional
from bond_yield.policies.periods import RoundPeriods
from bond_yield.scenarios.config import EngineConfig

PERIOD_POLICIES: dict[str, Callable[[], PeriodCountPolicy]] = {
    'reject': RejectFractional,
    'floor': FloorPeriods,
    'round': RoundPeriods,
}

CONVERGENCE_POLICIES: dict[str, Callable[[], ConvergencePolicy]] = {
    'best_effort': BestEffort,
    'strict': StrictConvergence,
}

POLICY_REGISTRY = {
    'periods': PERIOD_POLICIES,
    'convergence': CONVERGENCE_POLICIES,
}


def create_policies(config: EngineConfig) -> dict[str, Any]:
  """
  Create policy instances from engine configuration.

  Args:
    config: EngineConfig with policy names

  Returns:
    Dictionary with instantiated policy objects:
    - periods: PeriodCountPolicy
    - convergence: ConvergencePolicy

  Raises:
    KeyError: If a policy name is not found in the registry
  """
  try:
    periods_factory = PERIOD_POLICIES[config.periods]
  except KeyError as e:
    raise KeyError(f"Unknown periods policy: '{config.periods}'. "
                   f'Available: {list(PERIOD_POLICIES.keys())}') from e

  try:
    convergence_factory = CONVERGENCE_POLICIES[config.convergence]
  except KeyError as e:
    raise KeyError(f"Unknown convergence policy: '{config.convergence}'. "
                   f'Available: {list(CONVERGENCE_POLICIES.keys())}') from e

  return {
      'periods': periods_factory(),
      'convergence': convergence_factory(),
  }


def list_policies() -> dict[str, list[str]]:
  """
  List all available policies by category.

  Returns:
    Dictionary mapping category names to list of policy names
  """
  result: dict[str, list[str]] = {}
  for category, policies_dict in POLICY_REGISTRY.items():
    policy_dict = cast(dict[str, object], policies_dict)
    result[category] = list(policy_dict.keys())
  return result
