"""
Named pass/fail outcome shared by the bond input checks.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class CheckResult:
  """
  Outcome of one named input check.

  Attributes:
    field: Wire name of the checked field (e.g. 'faceValue')
    ok: True when the check passed
    details: 'ok', or what was wrong with the value
  """

  field: str
  ok: bool
  details: str = 'ok'

  @property
  def violation(self) -> str:
    '''Violation line as carried by InvalidInputError.'''
    return f'{self.field}: {self.details}'

  def __str__(self) -> str:
    mark = '✓' if self.ok else '✗'
    return f'{mark} {self.violation}'


def passed(field: str) -> CheckResult:
  return CheckResult(field=field, ok=True)


def failed(field: str, details: str) -> CheckResult:
  return CheckResult(field=field, ok=False, details=details)
