"""CLI entry point for the yearly asset projection table."""

import argparse
import datetime
import sys
from pathlib import Path

from household_sim_jp.config import build_params, build_rules, create_parser, load_config, resolve
from household_sim_jp.params import InputParameters, RuleConfig
from household_sim_jp.simulation import ProjectionRow, simulate
from household_sim_jp.storage import load_snapshot, save_snapshot

_MONTHLY_LABELS = {
    "house_loan": "住宅ローン",
    "car_loan": "自動車ローン",
    "utilities": "水道光熱費",
    "phone": "携帯電話",
    "wifi": "インターネット",
    "husband_allowance": "夫小遣い",
    "wife_allowance": "妻小遣い",
    "food": "食費",
    "medical": "医療費",
    "insurance": "保険料",
    "contact": "コンタクト",
}

_YEARLY_LABELS = {
    "event": "イベント",
    "ceremony": "冠婚葬祭",
    "travel": "旅行",
    "celebration": "お祝い",
}


def _yen(v: int) -> str:
    return f"{v:,}"


def _wife_age(row: ProjectionRow, has_wife: bool) -> str:
    return str(row.wife_age) if has_wife else "-"


def _signed_yen(v: int) -> str:
    return f"+{v:,}" if v >= 0 else f"{v:,}"


def _print_header(params: InputParameters, rows: list[ProjectionRow], rules: RuleConfig):
    print("=" * 100)
    if rows:
        print(
            f"資産推移シミュレーション（{rows[0].year}年-{rows[-1].year}年、{len(rows)}年間、"
            f"夫{rules.terminal_age}歳まで）"
        )
    else:
        print("資産推移シミュレーション（対象期間なし）")
    print(
        f"  夫: {params.husband_birth_year}年生 / 年収{_yen(params.husband_income)}円 / "
        f"{params.husband_retirement_age}歳退職"
    )
    if params.has_wife:
        print(
            f"  妻: {params.wife_birth_year}年生 / 年収{_yen(params.wife_income)}円 / "
            f"{params.wife_retirement_age}歳退職"
        )
    declared = [(i, y) for i, y in enumerate(params.child_birth_years, start=1) if y]
    if declared:
        parts = [f"第{i}子{y}年" for i, y in declared]
        print(f"  子: {len(declared)}人（{', '.join(parts)}）")
    else:
        print("  子: なし")
    print(f"  初期資産: {_yen(params.current_assets)}円 / 税率: {rules.tax_rate:.0%}")
    print("=" * 100)


def _print_yearly_table(rows: list[ProjectionRow], has_wife: bool, every: int = 1):
    print(
        f"{'年':<6} {'夫':>4} {'妻':>4} {'手取り収入':>14} {'支出':>14} "
        f"{'収支':>14} {'資産残高':>16}  イベント"
    )
    print("-" * 100)
    for i, row in enumerate(rows):
        if i % every != 0 and i != len(rows) - 1:
            continue
        print(
            f"{row.year:<6} {row.husband_age:>4} {_wife_age(row, has_wife):>4} "
            f"{_yen(row.total_income):>14} {_yen(row.total_expense):>14} "
            f"{_signed_yen(row.balance):>14} {_yen(row.assets):>16}  "
            f"{' / '.join(row.events)}"
        )
    print("-" * 100)


def _print_detail(row: ProjectionRow, has_wife: bool):
    income = row.income
    expense = row.expense
    wife = f"{row.wife_age}歳" if has_wife else "-"
    print(f"\n【{row.year}年の内訳】（夫{row.husband_age}歳・妻{wife}）")
    print("  収入:")
    print(f"    夫給与(額面):     {_yen(income.husband_salary):>14}")
    print(f"    妻給与(額面):     {_yen(income.wife_salary):>14}")
    print(f"    夫年金:           {_yen(income.husband_pension):>14}")
    print(f"    妻年金:           {_yen(income.wife_pension):>14}")
    print(f"    児童手当:         {_yen(income.child_allowance):>14}")
    print(f"    育児休業給付金:   {_yen(income.maternity_benefit):>14}")
    print(f"    額面合計:         {_yen(income.total_gross):>14}")
    print(f"    手取り合計:       {_yen(income.total_net):>14}")
    print("  支出:")
    for key, value in expense.monthly.items():
        if value:
            print(f"    {_MONTHLY_LABELS[key]:<16}{_yen(value):>14}/月")
    print(f"    月額計×12:        {_yen(expense.annual_from_monthly):>14}")
    for key, value in expense.yearly.items():
        if value:
            print(f"    {_YEARLY_LABELS[key]:<16}{_yen(value):>14}/年")
    for cost in expense.child_costs:
        print(
            f"    第{cost.order}子({cost.age}歳): 食費{_yen(cost.food)} + "
            f"教育費{_yen(cost.education)} = {_yen(cost.total)}"
        )
    print(f"    支出合計:         {_yen(expense.annual_total):>14}")
    print(f"  収支: {_signed_yen(row.balance)} / 資産残高: {_yen(row.assets)}")


def _add_args(parser: argparse.ArgumentParser):
    parser.add_argument("--detail", type=int, default=None, help="内訳を表示する年（西暦）")
    parser.add_argument("--every", type=int, default=1, help="N年ごとに表示（最終年は常に表示）")
    parser.add_argument("--save", type=Path, default=None, help="入力データをJSONに保存")
    parser.add_argument("--restore", type=Path, default=None, help="保存したJSONから入力データを復元")


def main(argv: list[str] | None = None):
    """Execute the household projection and print the yearly table."""
    parser = create_parser("資産推移シミュレーション")
    _add_args(parser)
    args = parser.parse_args(argv)
    config = load_config(args.config)

    if args.restore is not None:
        snapshot = load_snapshot(args.restore)
        if snapshot is None:
            print(f"保存データなし: {args.restore}（設定値で続行）", file=sys.stderr)
        else:
            config = {**config, **snapshot.to_dict()}

    params = build_params(resolve(args, config))
    try:
        rules = build_rules(config)
    except (TypeError, ValueError) as e:
        print(f"ルール設定が不正です: {e}", file=sys.stderr)
        raise SystemExit(1)
    if args.every < 1:
        print("--every は1以上を指定してください", file=sys.stderr)
        raise SystemExit(1)

    start_year = args.year if args.year is not None else datetime.date.today().year
    rows = simulate(params, start_year, rules)

    if args.save is not None and save_snapshot(params, args.save):
        print(f"  → {args.save}", file=sys.stderr)

    _print_header(params, rows, rules)
    if not rows:
        print("\n夫の年齢が終了年齢を超えているため、対象期間がありません。")
        return
    _print_yearly_table(rows, params.has_wife, args.every)

    if args.detail is not None:
        matching = [row for row in rows if row.year == args.detail]
        if matching:
            _print_detail(matching[0], params.has_wife)
        else:
            print(f"\n{args.detail}年は対象期間外です。")


if __name__ == "__main__":
    main()
