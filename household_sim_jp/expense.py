"""Yearly household expenses: fixed categories plus age-banded child costs."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from household_sim_jp.children import ChildProfile
from household_sim_jp.params import (
    MONTHLY_EXPENSE_KEYS,
    YEARLY_EXPENSE_KEYS,
    InputParameters,
    RuleConfig,
)


@dataclass(frozen=True)
class ChildCost:
    order: int
    age: int
    food: int       # 食費増分（年額）
    education: int  # 教育・保育費（年額）

    @property
    def total(self) -> int:
        return self.food + self.education


@dataclass(frozen=True)
class YearlyExpense:
    monthly: Mapping[str, int] = field(hash=False)   # カテゴリ別月額（読み取り専用）
    monthly_total: int
    annual_from_monthly: int
    yearly: Mapping[str, int] = field(hash=False)    # カテゴリ別年額（読み取り専用）
    yearly_total: int
    child_costs: tuple[ChildCost, ...]
    annual_total: int

    def __post_init__(self):
        object.__setattr__(self, "monthly", MappingProxyType(dict(self.monthly)))
        object.__setattr__(self, "yearly", MappingProxyType(dict(self.yearly)))

    @property
    def child_total(self) -> int:
        return sum(c.total for c in self.child_costs)


def child_food_cost(age: int, rules: RuleConfig) -> int:
    """Annual food-cost increment for a child. Zero from age 23 onward."""
    if age < 0:
        return 0
    for upper, monthly in rules.child_food_bands:
        if age < upper:
            return monthly * 12
    return 0


def child_education_cost(age: int, order: int, rules: RuleConfig) -> int:
    """Annual education/childcare cost for a child (0 outside ages 0-21).

    Nursery-band fees are charged to the first child only.
    """
    for lo, hi, amount, first_child_only in rules.education_bands:
        if lo <= age <= hi:
            if first_child_only and order != 1:
                return 0
            return amount
    return 0


def calc_child_cost(child: ChildProfile, rules: RuleConfig) -> ChildCost:
    return ChildCost(
        order=child.order,
        age=child.age,
        food=child_food_cost(child.age, rules),
        education=child_education_cost(child.age, child.order, rules),
    )


def calc_yearly_expense(
    params: InputParameters,
    children: list[ChildProfile],
    rules: RuleConfig | None = None,
) -> YearlyExpense:
    """Calculate one year's household expenses. Unborn children cost nothing."""
    if rules is None:
        rules = RuleConfig()

    monthly = {key: getattr(params, key) for key in MONTHLY_EXPENSE_KEYS}
    monthly_total = sum(monthly.values())
    annual_from_monthly = monthly_total * 12

    yearly = {key: getattr(params, key) for key in YEARLY_EXPENSE_KEYS}
    yearly_total = sum(yearly.values())

    child_costs = tuple(calc_child_cost(c, rules) for c in children if c.exists)

    return YearlyExpense(
        monthly=monthly,
        monthly_total=monthly_total,
        annual_from_monthly=annual_from_monthly,
        yearly=yearly,
        yearly_total=yearly_total,
        child_costs=child_costs,
        annual_total=annual_from_monthly + yearly_total + sum(c.total for c in child_costs),
    )
