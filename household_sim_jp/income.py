"""Yearly household income: salary, pension, child allowance and maternity benefit."""

import math
from dataclasses import dataclass
from decimal import Decimal

from household_sim_jp.children import ChildProfile
from household_sim_jp.params import InputParameters, RuleConfig


@dataclass(frozen=True)
class YearlyIncome:
    husband_salary: int      # 夫の額面給与（退職後0）
    wife_salary: int         # 妻の額面給与（退職後・出産年は0）
    husband_pension: int
    wife_pension: int
    child_allowances: tuple[int, ...]  # 子ごとの児童手当（年額、入力欄順）
    maternity_benefit: int   # 育児休業給付金
    total_gross: int
    total_net: int

    @property
    def child_allowance(self) -> int:
        return sum(self.child_allowances)

    @property
    def total_pension(self) -> int:
        return self.husband_pension + self.wife_pension

    @property
    def salary_gross(self) -> int:
        return self.husband_salary + self.wife_salary


def blended_maternity_rate(rules: RuleConfig) -> Decimal:
    """Weighted average of the first-half and second-half leave benefit rates."""
    months = rules.maternity_high_months + rules.maternity_low_months
    weighted = (
        rules.maternity_high_rate * rules.maternity_high_months
        + rules.maternity_low_rate * rules.maternity_low_months
    )
    return weighted / months


def calc_child_allowance(child: ChildProfile, rules: RuleConfig) -> int:
    """Annual child allowance (児童手当) for one child. Zero outside 0 <= age < 18."""
    if not (0 <= child.age < rules.allowance_end_age):
        return 0
    if child.order >= rules.allowance_elevated_order:
        monthly = rules.allowance_elevated_monthly
    elif child.age < rules.allowance_young_age:
        monthly = rules.allowance_young_monthly
    else:
        monthly = rules.allowance_base_monthly
    return monthly * 12


def _salary(income: int, age: int, retirement_age: int) -> int:
    return 0 if age >= retirement_age else income


def _pension(age: int, monthly: int, rules: RuleConfig) -> int:
    return monthly * 12 if age >= rules.pension_start_age else 0


def calc_yearly_income(
    params: InputParameters,
    husband_age: int,
    wife_age: int,
    year: int,
    children: list[ChildProfile],
    rules: RuleConfig | None = None,
) -> YearlyIncome:
    """Calculate one year's household income.

    Rules, in order:
      1. salary stops once a spouse reaches their retirement age
      2. in the calendar year a child is born (wife still working age), the wife's
         salary is replaced by floor(income × blended leave rate)
      3. flat pension from pension_start_age, regardless of salary
      4. child allowance per child, third child and later at the elevated rate
      5. net = floor(salary × (1 - tax_rate)) + pension + allowance + maternity
    """
    if rules is None:
        rules = RuleConfig()

    husband_salary = _salary(params.husband_income, husband_age, params.husband_retirement_age)
    wife_salary = 0
    if params.has_wife:
        wife_salary = _salary(params.wife_income, wife_age, params.wife_retirement_age)

    maternity_benefit = 0
    if (
        params.has_wife
        and wife_age < params.wife_retirement_age
        and any(c.birth_year == year for c in children)
    ):
        maternity_benefit = math.floor(params.wife_income * blended_maternity_rate(rules))
        wife_salary = 0

    husband_pension = _pension(husband_age, rules.husband_pension_monthly, rules)
    wife_pension = 0
    if params.has_wife:
        wife_pension = _pension(wife_age, rules.wife_pension_monthly, rules)

    child_allowances = tuple(calc_child_allowance(c, rules) for c in children)

    salary_gross = husband_salary + wife_salary
    salary_net = math.floor(salary_gross * (1 - rules.tax_rate))
    untaxed = husband_pension + wife_pension + sum(child_allowances) + maternity_benefit

    return YearlyIncome(
        husband_salary=husband_salary,
        wife_salary=wife_salary,
        husband_pension=husband_pension,
        wife_pension=wife_pension,
        child_allowances=child_allowances,
        maternity_benefit=maternity_benefit,
        total_gross=salary_gross + untaxed,
        total_net=salary_net + untaxed,
    )
