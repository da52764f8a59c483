"""Tests for TOML config loading and CLI > config > default resolution."""

from decimal import Decimal

import pytest
from household_sim_jp.config import (
    DEFAULTS,
    build_params,
    build_rules,
    create_parser,
    load_config,
    resolve,
)


class TestLoadConfig:
    def test_missing_file(self, tmp_path):
        assert load_config(tmp_path / "none.toml") == {}

    def test_children_list_fills_slots(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("children = [2026, 0, 2031]\n", encoding="utf-8")
        config = load_config(path)
        assert "children" not in config
        assert config["child1_birth_year"] == 2026
        assert config["child2_birth_year"] == 0
        assert config["child3_birth_year"] == 2031

    @pytest.mark.parametrize(
        "line",
        ["children = [2020, 2022, 2024, 2026]", "children = 2026", 'children = "2026,2028"'],
    )
    def test_invalid_children_exits(self, tmp_path, capsys, line):
        path = tmp_path / "config.toml"
        path.write_text(line + "\n", encoding="utf-8")
        with pytest.raises(SystemExit):
            load_config(path)
        assert "最大3人" in capsys.readouterr().err

    def test_empty_children_list(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("children = []\n", encoding="utf-8")
        assert load_config(path) == {}

    def test_explicit_slot_wins_over_children_list(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("children = [2026]\nchild1_birth_year = 2027\n", encoding="utf-8")
        assert load_config(path)["child1_birth_year"] == 2027

    def test_expense_tables_flattened(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text(
            "[expenses.monthly]\nfood = 60000\n\n[expenses.yearly]\ntravel = 200000\n",
            encoding="utf-8",
        )
        config = load_config(path)
        assert config["food"] == 60000
        assert config["travel"] == 200000
        assert "expenses" not in config

    def test_invalid_toml_exits(self, tmp_path, capsys):
        path = tmp_path / "config.toml"
        path.write_text("husband_income = = 1\n", encoding="utf-8")
        with pytest.raises(SystemExit):
            load_config(path)
        assert "設定ファイルの読み込みに失敗" in capsys.readouterr().err


class TestResolve:
    def test_priority(self):
        args = create_parser("test").parse_args(["--husband-income", "7000000"])
        config = {"husband_income": 5_000_000, "wife_income": 3_000_000}
        r = resolve(args, config)
        assert r["husband_income"] == 7_000_000
        assert r["wife_income"] == 3_000_000
        assert r["food"] == DEFAULTS["food"]
        assert r["husband_retirement_age"] == 65

    def test_build_params_coerces_invalid(self):
        args = create_parser("test").parse_args([])
        params = build_params(resolve(args, {"wife_income": "unknown", "food": 50000}))
        assert params.wife_income == 0
        assert params.food == 50000

    def test_year_flag(self):
        args = create_parser("test").parse_args(["--year", "2030"])
        assert args.year == 2030


class TestBuildRules:
    def test_default(self):
        assert build_rules({}).terminal_age == 100

    def test_override(self):
        rules = build_rules({"rules": {"tax_rate": 0.25, "terminal_age": 90}})
        assert rules.tax_rate == Decimal("0.25")
        assert rules.terminal_age == 90

    def test_unknown_key(self):
        with pytest.raises(ValueError, match="未知のルール設定"):
            build_rules({"rules": {"inflation_rate": 0.02}})

    def test_table_shape_rejected(self):
        with pytest.raises(ValueError):
            build_rules({"rules": 3})
