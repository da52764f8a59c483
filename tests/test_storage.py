"""Tests for snapshot persistence."""

import json

from household_sim_jp import InputParameters, load_snapshot, save_snapshot


class TestSnapshot:
    def setup_method(self):
        self.params = InputParameters(
            husband_birth_year=1990, wife_birth_year=1992,
            husband_income=6_000_000, child1_birth_year=2026,
            food=60_000, travel=200_000, current_assets=-300_000,
        )

    def test_round_trip(self, tmp_path):
        path = tmp_path / "household.json"
        assert save_snapshot(self.params, path)
        assert load_snapshot(path) == self.params

    def test_creates_parent_directory(self, tmp_path):
        path = tmp_path / "nested" / "household.json"
        assert save_snapshot(self.params, path)
        assert path.exists()

    def test_missing_file(self, tmp_path):
        assert load_snapshot(tmp_path / "none.json") is None

    def test_invalid_fields_default(self, tmp_path):
        path = tmp_path / "household.json"
        path.write_text(
            json.dumps({"husband_income": "oops", "food": 50000, "wife_retirement_age": -1}),
            encoding="utf-8",
        )
        params = load_snapshot(path)
        assert params.husband_income == 0
        assert params.food == 50000
        assert params.wife_retirement_age == 60

    def test_corrupt_json(self, tmp_path, capsys):
        path = tmp_path / "household.json"
        path.write_text("{not json", encoding="utf-8")
        assert load_snapshot(path) is None
        assert "読み込みに失敗" in capsys.readouterr().err

    def test_non_object_payload(self, tmp_path, capsys):
        path = tmp_path / "household.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")
        assert load_snapshot(path) is None
        assert "形式が不正" in capsys.readouterr().err

    def test_save_failure_reported(self, tmp_path, capsys):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        assert not save_snapshot(self.params, blocker / "household.json")
        assert "保存に失敗" in capsys.readouterr().err
