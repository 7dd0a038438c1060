from bond_yield.domain.checks import CheckResult
from bond_yield.domain.checks import failed
from bond_yield.domain.checks import passed


class TestCheckResult:
  """Tests for CheckResult and its constructors."""

  def test_passed(self):
    result = passed('faceValue')

    assert result == CheckResult('faceValue', True, 'ok')
    assert str(result) == '✓ faceValue: ok'

  def test_failed_violation_line(self):
    """The violation line is what InvalidInputError carries."""
    result = failed('marketPrice', 'must be > 0, got 0.0')

    assert not result.ok
    assert result.violation == 'marketPrice: must be > 0, got 0.0'
    assert str(result) == '✗ marketPrice: must be > 0, got 0.0'
