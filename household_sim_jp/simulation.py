"""Core projection engine."""

from dataclasses import dataclass

from household_sim_jp.children import ChildProfile, resolve_children
from household_sim_jp.expense import YearlyExpense, calc_yearly_expense
from household_sim_jp.income import YearlyIncome, calc_yearly_income
from household_sim_jp.params import InputParameters, RuleConfig


@dataclass(frozen=True)
class ProjectionRow:
    year: int
    husband_age: int
    wife_age: int
    income: YearlyIncome
    expense: YearlyExpense
    balance: int   # 年間収支 = 手取り収入 - 支出
    assets: int    # 累積資産
    events: tuple[str, ...] = ()

    @property
    def total_income(self) -> int:
        return self.income.total_net

    @property
    def total_expense(self) -> int:
        return self.expense.annual_total


def horizon_years(
    params: InputParameters, start_year: int, rules: RuleConfig | None = None,
) -> range:
    """Simulated years: start_year until the husband passes terminal_age (inclusive)."""
    if rules is None:
        rules = RuleConfig()
    n_years = max(0, rules.terminal_age - params.husband_age(start_year) + 1)
    return range(start_year, start_year + n_years)


def detect_events(
    params: InputParameters,
    husband_age: int,
    wife_age: int,
    children: list[ChildProfile],
    rules: RuleConfig | None = None,
) -> list[str]:
    """Return life-event labels for one year (retirement, pension start, child milestones)."""
    if rules is None:
        rules = RuleConfig()
    events = []
    spouses = [("夫", husband_age, params.husband_retirement_age)]
    if params.has_wife:
        spouses.append(("妻", wife_age, params.wife_retirement_age))
    for label, age, retirement_age in spouses:
        if retirement_age > 0 and age == retirement_age:
            events.append(f"{label}退職")
        if age == rules.pension_start_age:
            events.append(f"{label}年金開始")
    milestones = dict(rules.child_milestones)
    for child in children:
        if child.age in milestones:
            events.append(f"第{child.order}子{milestones[child.age]}")
    return events


def simulate(
    params: InputParameters,
    start_year: int,
    rules: RuleConfig | None = None,
) -> list[ProjectionRow]:
    """Project the household year by year from start_year.

    Pure function of its arguments: the same inputs always give the same rows.
    The loop runs at most terminal_age + 1 times and stops after the year in which
    the husband is terminal_age.
    """
    if rules is None:
        rules = RuleConfig()

    rows: list[ProjectionRow] = []
    assets = params.current_assets
    for year in horizon_years(params, start_year, rules):
        husband_age = params.husband_age(year)
        wife_age = params.wife_age(year)
        children = resolve_children(params, year)

        income = calc_yearly_income(params, husband_age, wife_age, year, children, rules)
        expense = calc_yearly_expense(params, children, rules)
        balance = income.total_net - expense.annual_total
        assets += balance

        rows.append(ProjectionRow(
            year=year,
            husband_age=husband_age,
            wife_age=wife_age,
            income=income,
            expense=expense,
            balance=balance,
            assets=assets,
            events=tuple(detect_events(params, husband_age, wife_age, children, rules)),
        ))
    return rows
