"""Household Asset Projection Package."""

from household_sim_jp.params import (
    InputParameters,
    RuleConfig,
    from_mapping,
    MONTHLY_EXPENSE_KEYS,
    YEARLY_EXPENSE_KEYS,
    FIELD_NAMES,
)
from household_sim_jp.children import ChildProfile, resolve_children
from household_sim_jp.income import (
    YearlyIncome,
    calc_yearly_income,
    calc_child_allowance,
    blended_maternity_rate,
)
from household_sim_jp.expense import (
    YearlyExpense,
    ChildCost,
    calc_yearly_expense,
    child_food_cost,
    child_education_cost,
)
from household_sim_jp.simulation import (
    ProjectionRow,
    simulate,
    detect_events,
    horizon_years,
)
from household_sim_jp.storage import save_snapshot, load_snapshot

__all__ = [
    "InputParameters",
    "RuleConfig",
    "from_mapping",
    "MONTHLY_EXPENSE_KEYS",
    "YEARLY_EXPENSE_KEYS",
    "FIELD_NAMES",
    "ChildProfile",
    "resolve_children",
    "YearlyIncome",
    "calc_yearly_income",
    "calc_child_allowance",
    "blended_maternity_rate",
    "YearlyExpense",
    "ChildCost",
    "calc_yearly_expense",
    "child_food_cost",
    "child_education_cost",
    "ProjectionRow",
    "simulate",
    "detect_events",
    "horizon_years",
    "save_snapshot",
    "load_snapshot",
]
