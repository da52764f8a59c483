"""Household input snapshot and rule parameters."""

import dataclasses
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Mapping

# 月額固定支出カテゴリ（×12で年額化）
MONTHLY_EXPENSE_KEYS: tuple[str, ...] = (
    "house_loan",
    "car_loan",
    "utilities",
    "phone",
    "wifi",
    "husband_allowance",
    "wife_allowance",
    "food",
    "medical",
    "insurance",
    "contact",
)

# 年額支出カテゴリ（年額のまま計上）
YEARLY_EXPENSE_KEYS: tuple[str, ...] = (
    "event",
    "ceremony",
    "travel",
    "celebration",
)

CHILD_BIRTH_YEAR_KEYS: tuple[str, ...] = (
    "child1_birth_year",
    "child2_birth_year",
    "child3_birth_year",
)

DEFAULT_HUSBAND_RETIREMENT_AGE = 65
DEFAULT_WIFE_RETIREMENT_AGE = 60


@dataclass(frozen=True)
class InputParameters:
    """Immutable household snapshot. Money is whole yen."""

    husband_birth_year: int = 0
    wife_birth_year: int = 0
    husband_income: int = 0   # 夫の額面年収（円）
    wife_income: int = 0      # 妻の額面年収（円）
    husband_retirement_age: int = DEFAULT_HUSBAND_RETIREMENT_AGE
    wife_retirement_age: int = DEFAULT_WIFE_RETIREMENT_AGE

    # 子の生年（0=未定）
    child1_birth_year: int = 0
    child2_birth_year: int = 0
    child3_birth_year: int = 0

    # 月額固定支出（円/月）
    house_loan: int = 0
    car_loan: int = 0
    utilities: int = 0
    phone: int = 0
    wifi: int = 0
    husband_allowance: int = 0
    wife_allowance: int = 0
    food: int = 0
    medical: int = 0
    insurance: int = 0
    contact: int = 0

    # 年額支出（円/年）
    event: int = 0
    ceremony: int = 0
    travel: int = 0
    celebration: int = 0

    # 現在の資産残高（負債超過なら負）
    current_assets: int = 0

    @property
    def child_birth_years(self) -> tuple[int, int, int]:
        return (self.child1_birth_year, self.child2_birth_year, self.child3_birth_year)

    def husband_age(self, year: int) -> int:
        return year - self.husband_birth_year

    def wife_age(self, year: int) -> int:
        return year - self.wife_birth_year

    @property
    def has_wife(self) -> bool:
        return self.wife_birth_year != 0

    def to_dict(self) -> dict[str, int]:
        return dataclasses.asdict(self)


FIELD_NAMES: tuple[str, ...] = tuple(f.name for f in dataclasses.fields(InputParameters))


def _coerce_int(value: object, *, allow_negative: bool = False) -> int | None:
    """Convert a raw form/storage value to int. Returns None when unusable."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        result = value
    elif isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return None
        result = int(value)
    elif isinstance(value, str):
        s = value.strip().replace(",", "")
        if not s:
            return None
        try:
            result = int(s)
        except ValueError:
            try:
                result = int(float(s))
            except (ValueError, OverflowError):
                return None
    else:
        return None
    if result < 0 and not allow_negative:
        return None
    return result


def from_mapping(raw: Mapping[str, object]) -> InputParameters:
    """Build InputParameters from a flat mapping of field name → value.

    Absent or invalid values fall back to the field default (0, or 65/60 for
    retirement ages). Only ``current_assets`` may be negative. Unknown keys are ignored.
    """
    values: dict[str, int] = {}
    for f in dataclasses.fields(InputParameters):
        v = _coerce_int(raw.get(f.name), allow_negative=(f.name == "current_assets"))
        if v is not None:
            values[f.name] = v
    return InputParameters(**values)


# 教育費テーブル: (下限年齢, 上限年齢, 年額・円, 第1子のみ課金)
_EDUCATION_BANDS: tuple[tuple[int, int, int, bool], ...] = (
    (0, 2, 480_000, True),       # 保育園（第2子以降は無償）
    (3, 5, 120_000, False),      # 幼稚園・保育園（無償化後の実費）
    (6, 11, 350_000, False),     # 小学校
    (12, 14, 540_000, False),    # 中学校
    (15, 17, 510_000, False),    # 高校
    (18, 21, 1_000_000, False),  # 大学
)

# 子の食費増分: (年齢上限・未満, 月額・円)
_CHILD_FOOD_BANDS: tuple[tuple[int, int], ...] = (
    (6, 10_000),
    (13, 20_000),
    (23, 30_000),
)

# 子のライフイベント: 年齢 → ラベル
_CHILD_MILESTONES: tuple[tuple[int, str], ...] = (
    (0, "誕生"),
    (6, "小学校入学"),
    (12, "中学校入学"),
    (15, "高校入学"),
    (18, "大学入学"),
    (22, "大学卒業"),
)


@dataclass(frozen=True)
class RuleConfig:

    # 税金・社会保険料率（簡易計算、給与にのみ適用）
    tax_rate: Decimal = Decimal("0.20")
    terminal_age: int = 100

    # 公的年金（定額・月額）
    pension_start_age: int = 65
    husband_pension_monthly: int = 170_000
    wife_pension_monthly: int = 130_000

    # 児童手当（2024年改正: 高校生年代まで・第3子以降3万円）
    allowance_base_monthly: int = 10_000
    allowance_young_monthly: int = 15_000
    allowance_elevated_monthly: int = 30_000
    allowance_young_age: int = 3
    allowance_elevated_order: int = 3
    allowance_end_age: int = 18

    # 育児休業給付金: 前半67%・後半50%
    maternity_high_rate: Decimal = Decimal("0.67")
    maternity_low_rate: Decimal = Decimal("0.50")
    maternity_high_months: int = 6
    maternity_low_months: int = 6

    education_bands: tuple[tuple[int, int, int, bool], ...] = _EDUCATION_BANDS
    child_food_bands: tuple[tuple[int, int], ...] = _CHILD_FOOD_BANDS
    child_milestones: tuple[tuple[int, str], ...] = _CHILD_MILESTONES

    def __post_init__(self):
        for name in ("tax_rate", "maternity_high_rate", "maternity_low_rate"):
            value = getattr(self, name)
            if not isinstance(value, Decimal):
                try:
                    object.__setattr__(self, name, Decimal(str(value)))
                except InvalidOperation:
                    raise ValueError(f"{name}に数値以外が指定されています: {value!r}") from None
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            if f.type is int and (not isinstance(value, int) or isinstance(value, bool)):
                raise ValueError(f"{f.name}は整数で指定してください: {value!r}")
        if not (0 <= self.tax_rate < 1):
            raise ValueError(f"税率{self.tax_rate}は対象外です（0以上1未満）")
        if self.terminal_age <= 0:
            raise ValueError(f"終了年齢{self.terminal_age}歳は対象外です（1歳以上）")
        if self.maternity_high_months + self.maternity_low_months <= 0:
            raise ValueError("育休期間の合計は1ヶ月以上が必要です")


SCALAR_RULE_KEYS: tuple[str, ...] = tuple(
    f.name for f in dataclasses.fields(RuleConfig)
    if f.name not in ("education_bands", "child_food_bands", "child_milestones")
)
