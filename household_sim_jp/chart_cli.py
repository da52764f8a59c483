"""CLI entry point for chart generation."""

import datetime
import sys
from pathlib import Path

from household_sim_jp.charts import plot_assets, plot_cashflow
from household_sim_jp.config import build_params, build_rules, create_parser, load_config, resolve
from household_sim_jp.simulation import simulate


def _build_parser():
    parser = create_parser("資産推移シミュレーション チャート生成")
    parser.add_argument(
        "--output", type=Path, default=Path("reports/charts"),
        help="出力ディレクトリ (default: reports/charts)",
    )
    parser.add_argument(
        "--name", type=str, default="",
        help="出力ファイル名のサフィックス（例: a → assets-a.png）",
    )
    return parser


def main(argv: list[str] | None = None):
    parser = _build_parser()
    args = parser.parse_args(argv)
    config = load_config(args.config)
    params = build_params(resolve(args, config))
    try:
        rules = build_rules(config)
    except (TypeError, ValueError) as e:
        print(f"ルール設定が不正です: {e}", file=sys.stderr)
        raise SystemExit(1)

    start_year = args.year if args.year is not None else datetime.date.today().year
    print(f"シミュレーション（{start_year}年→夫{rules.terminal_age}歳）...", file=sys.stderr)
    rows = simulate(params, start_year, rules)
    if not rows:
        print("  有効な結果なし（夫の年齢が終了年齢を超えています）", file=sys.stderr)
        raise SystemExit(1)

    path = plot_assets(rows, args.output, name=args.name)
    print(f"  → {path}", file=sys.stderr)
    path = plot_cashflow(rows, args.output, name=args.name)
    print(f"  → {path}", file=sys.stderr)
    print("完了", file=sys.stderr)


if __name__ == "__main__":
    main()
