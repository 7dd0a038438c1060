"""
Engine configuration.

EngineConfig is a serializable (JSON-friendly) configuration class that
names the policies to use and carries the solver constants and the
schedule anchor date.
"""

from dataclasses import asdict
from dataclasses import dataclass
import datetime as dt
import json
from typing import Any


@dataclass
class EngineConfig:
  """
  Configuration for a valuation run.

  Policy fields are strings that map to factories in the registry, so the
  config can be written to JSON for reproducibility.

  Attributes:
    name: Human-readable config name
    periods: Period-count policy name ('reject', 'floor', 'round')
    convergence: Convergence policy name ('best_effort', 'strict')
    max_iterations: Newton-Raphson iteration cap
    tolerance: Absolute price tolerance for convergence
    restart_rate: Periodic rate to restart from after a divergent step
    anchor_date: ISO date the cash-flow schedule counts from
  """
  name: str = 'default'
  periods: str = 'reject'
  convergence: str = 'best_effort'
  max_iterations: int = 1000
  tolerance: float = 1e-6
  restart_rate: float = 0.001
  anchor_date: str = '2026-02-23'

  @classmethod
  def default(cls) -> 'EngineConfig':
    """
    Create default configuration.

    Uses:
      - Fractional period counts rejected
      - Best-effort result when the iteration cap is hit
      - 1000 iterations, 1e-6 tolerance, restart at 0.001
      - Schedule anchored at 2026-02-23
    """
    return cls()

  @classmethod
  def strict(cls) -> 'EngineConfig':
    """Reject fractional periods and raise on non-convergence."""
    return cls(name='strict', periods='reject', convergence='strict')

  @classmethod
  def lenient(cls) -> 'EngineConfig':
    """Floor fractional periods and return best-effort yields."""
    return cls(name='lenient', periods='floor', convergence='best_effort')

  @property
  def anchor(self) -> dt.date:
    return dt.date.fromisoformat(self.anchor_date)

  def to_dict(self) -> dict[str, Any]:
    """Convert to dictionary."""
    return asdict(self)

  def to_json(self) -> str:
    """Serialize to JSON string."""
    return json.dumps(self.to_dict(), indent=2)

  @classmethod
  def from_dict(cls, data: dict[str, Any]) -> 'EngineConfig':
    """Create from dictionary."""
    return cls(**data)

  @classmethod
  def from_json(cls, json_str: str) -> 'EngineConfig':
    """Create from JSON string."""
    return cls.from_dict(json.loads(json_str))


PRESETS = {
    'default': EngineConfig.default,
    'strict': EngineConfig.strict,
    'lenient': EngineConfig.lenient,
}
