"""
Engine policies for choices the bond math leaves open.

Each policy resolves one decision (how to count periods, what to do when
the solver does not converge) and returns both a value and diagnostic
information.

To add a new policy:
1. Create a new class inheriting from the appropriate base
   (e.g., PeriodCountPolicy)
2. Implement the compute() method returning PolicyOutput
3. Register in scenarios/registry.py
"""

from bond_yield.policies.convergence import BestEffort
from bond_yield.policies.convergence import ConvergencePolicy
from bond_yield.policies.convergence import StrictConvergence
from bond_yield.policies.periods import FloorPeriods
from bond_yield.policies.periods import PeriodCountPolicy
from bond_yield.policies.periods import RejectFractional
from bond_yield.policies.periods import RoundPeriods

__all__ = [
  'PeriodCountPolicy', 'RejectFractional', 'FloorPeriods', 'RoundPeriods',
  'ConvergencePolicy', 'BestEffort', 'StrictConvergence',
]
