'''Bond math engine with pure functions.'''

from bond_yield.domain.types import schedule_to_frame
from bond_yield.engine.metrics import classify_premium_discount
from bond_yield.engine.metrics import current_yield
from bond_yield.engine.metrics import total_interest
from bond_yield.engine.pricing import present_value
from bond_yield.engine.pricing import price_and_derivative
from bond_yield.engine.rounding import round_currency
from bond_yield.engine.rounding import round_half_away_from_zero
from bond_yield.engine.rounding import round_yield
from bond_yield.engine.schedule import add_months
from bond_yield.engine.schedule import DEFAULT_ANCHOR_DATE
from bond_yield.engine.schedule import generate_cash_flow_schedule
from bond_yield.engine.ytm import initial_guess
from bond_yield.engine.ytm import solve_ytm

__all__ = [
    'DEFAULT_ANCHOR_DATE',
    'add_months',
    'classify_premium_discount',
    'current_yield',
    'generate_cash_flow_schedule',
    'initial_guess',
    'present_value',
    'price_and_derivative',
    'round_currency',
    'round_half_away_from_zero',
    'round_yield',
    'schedule_to_frame',
    'solve_ytm',
    'total_interest',
]
