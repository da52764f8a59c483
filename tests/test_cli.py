"""Tests for the text CLI."""

import pytest
from household_sim_jp.cli import main


def _base_args(tmp_path) -> list[str]:
    return [
        "--config", str(tmp_path / "none.toml"),
        "--year", "2025",
        "--husband-birth-year", "1990",
        "--wife-birth-year", "1992",
        "--husband-income", "6000000",
        "--wife-income", "4000000",
    ]


class TestMain:
    def test_yearly_table(self, tmp_path, capsys):
        main(_base_args(tmp_path))
        out = capsys.readouterr().out
        assert "2025年-2090年、66年間" in out
        assert "8,000,000" in out
        assert "夫年金開始" in out

    def test_detail(self, tmp_path, capsys):
        main(_base_args(tmp_path) + ["--detail", "2025"])
        out = capsys.readouterr().out
        assert "【2025年の内訳】" in out
        assert "10,000,000" in out

    def test_undeclared_wife_age_shown_as_dash(self, tmp_path, capsys):
        main([
            "--config", str(tmp_path / "none.toml"), "--year", "2025",
            "--husband-birth-year", "1990", "--detail", "2025",
        ])
        out = capsys.readouterr().out
        assert "（夫35歳・妻-）" in out
        first_row = next(line for line in out.splitlines() if line.startswith("2025 "))
        assert first_row.split()[:3] == ["2025", "35", "-"]

    def test_declared_wife_age_shown(self, tmp_path, capsys):
        main(_base_args(tmp_path) + ["--detail", "2025"])
        assert "（夫35歳・妻33歳）" in capsys.readouterr().out

    def test_detail_out_of_range(self, tmp_path, capsys):
        main(_base_args(tmp_path) + ["--detail", "1999"])
        assert "1999年は対象期間外" in capsys.readouterr().out

    def test_empty_horizon(self, tmp_path, capsys):
        main(["--config", str(tmp_path / "none.toml"), "--year", "2025"])
        assert "対象期間がありません" in capsys.readouterr().out

    def test_save_and_restore(self, tmp_path, capsys):
        snapshot = tmp_path / "household.json"
        main(_base_args(tmp_path) + ["--save", str(snapshot)])
        capsys.readouterr()
        main(["--config", str(tmp_path / "none.toml"), "--year", "2025", "--restore", str(snapshot)])
        assert "66年間" in capsys.readouterr().out

    def test_restore_missing_continues(self, tmp_path, capsys):
        main(_base_args(tmp_path) + ["--restore", str(tmp_path / "none.json")])
        captured = capsys.readouterr()
        assert "保存データなし" in captured.err
        assert "66年間" in captured.out

    def test_invalid_rules_exit(self, tmp_path, capsys):
        config = tmp_path / "config.toml"
        config.write_text("[rules]\nunknown = 1\n", encoding="utf-8")
        with pytest.raises(SystemExit):
            main(["--config", str(config), "--year", "2025"])
        assert "ルール設定が不正" in capsys.readouterr().err

    @pytest.mark.parametrize("line", ["terminal_age = 90.5", "pension_start_age = \"65\""])
    def test_mistyped_rule_exits(self, tmp_path, capsys, line):
        config = tmp_path / "config.toml"
        config.write_text(f"[rules]\n{line}\n", encoding="utf-8")
        with pytest.raises(SystemExit):
            main(["--config", str(config), "--year", "2025", "--husband-birth-year", "1990"])
        assert "ルール設定が不正" in capsys.readouterr().err
