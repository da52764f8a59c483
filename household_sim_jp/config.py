"""TOML config loader with CLI > config > default resolution."""

import argparse
import sys
import tomllib
from pathlib import Path

from household_sim_jp.params import (
    CHILD_BIRTH_YEAR_KEYS,
    FIELD_NAMES,
    SCALAR_RULE_KEYS,
    InputParameters,
    RuleConfig,
    from_mapping,
)

DEFAULT_CONFIG_PATH = Path("config.toml")

DEFAULTS: dict[str, int] = InputParameters().to_dict()

_FLAG_HELP = {
    "husband_birth_year": "夫の生年（西暦）",
    "wife_birth_year": "妻の生年（西暦、0で妻なし）",
    "husband_income": "夫の額面年収（円）",
    "wife_income": "妻の額面年収（円）",
    "husband_retirement_age": "夫の退職年齢",
    "wife_retirement_age": "妻の退職年齢",
    "child1_birth_year": "第1子の生年（0で未定）",
    "child2_birth_year": "第2子の生年（0で未定）",
    "child3_birth_year": "第3子の生年（0で未定）",
    "house_loan": "住宅ローン（円/月）",
    "car_loan": "自動車ローン（円/月）",
    "utilities": "水道光熱費（円/月）",
    "phone": "携帯電話（円/月）",
    "wifi": "インターネット（円/月）",
    "husband_allowance": "夫の小遣い（円/月）",
    "wife_allowance": "妻の小遣い（円/月）",
    "food": "食費（円/月）",
    "medical": "医療費（円/月）",
    "insurance": "保険料（円/月）",
    "contact": "コンタクト等（円/月）",
    "event": "イベント費（円/年）",
    "ceremony": "冠婚葬祭（円/年）",
    "travel": "旅行（円/年）",
    "celebration": "お祝い（円/年）",
    "current_assets": "現在の資産残高（円、負債超過は負）",
}


def load_config(path: Path | None = None) -> dict:
    """Load TOML config file. Returns empty dict if file doesn't exist."""
    if path is None:
        path = DEFAULT_CONFIG_PATH
    if not path.exists():
        return {}
    try:
        with open(path, "rb") as f:
            raw = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        print(f"設定ファイルの読み込みに失敗: {path}: {e}", file=sys.stderr)
        raise SystemExit(1)
    # Normalize children: TOML list → child1..3 slots (0 keeps a slot empty)
    if "children" in raw:
        v = raw.pop("children")
        if not isinstance(v, list) or len(v) > len(CHILD_BIRTH_YEAR_KEYS):
            print(
                f"設定ファイルの children は最大{len(CHILD_BIRTH_YEAR_KEYS)}人の生年リストで"
                f"指定してください: {path}: {v!r}",
                file=sys.stderr,
            )
            raise SystemExit(1)
        for key, birth_year in zip(CHILD_BIRTH_YEAR_KEYS, v):
            raw.setdefault(key, birth_year)
    # Flatten [expenses.monthly] / [expenses.yearly] tables
    expenses = raw.pop("expenses", None)
    if isinstance(expenses, dict):
        for section in ("monthly", "yearly"):
            table = expenses.get(section)
            if isinstance(table, dict):
                for key, value in table.items():
                    raw.setdefault(key, value)
    return raw


def create_parser(description: str) -> argparse.ArgumentParser:
    """Create argparse parser with shared simulation flags."""
    d = DEFAULTS
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("--config", type=Path, default=None, help="設定ファイルパス (default: config.toml)")
    parser.add_argument("--year", type=int, default=None, help="シミュレーション開始年 (default: 今年)")
    for key in FIELD_NAMES:
        flag = "--" + key.replace("_", "-")
        parser.add_argument(flag, type=int, default=None, help=f"{_FLAG_HELP[key]} (default: {d[key]})")
    return parser


def resolve(args: argparse.Namespace, config: dict) -> dict:
    """Resolve values with priority: CLI flag > config.toml > hardcoded default."""
    resolved = {}
    for key, default in DEFAULTS.items():
        cli_val = getattr(args, key, None)
        resolved[key] = cli_val if cli_val is not None else config.get(key, default)
    return resolved


def build_params(r: dict) -> InputParameters:
    """Build InputParameters from resolved config dict (invalid values → defaults)."""
    return from_mapping(r)


def build_rules(config: dict) -> RuleConfig:
    """Build RuleConfig from the optional [rules] table. Unknown keys are rejected."""
    table = config.get("rules", {})
    if not isinstance(table, dict):
        raise ValueError("[rules] はテーブルで指定してください")
    unknown = sorted(set(table) - set(SCALAR_RULE_KEYS))
    if unknown:
        raise ValueError(f"未知のルール設定: {', '.join(unknown)}")
    return RuleConfig(**table)
