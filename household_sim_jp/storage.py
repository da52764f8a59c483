"""Snapshot persistence for the raw household inputs (not the computed rows)."""

import json
import sys
from pathlib import Path

from household_sim_jp.params import InputParameters, from_mapping

DEFAULT_SNAPSHOT_PATH = Path("household.json")


def save_snapshot(params: InputParameters, path: Path | None = None) -> bool:
    """Write the input snapshot as JSON. Returns False (and reports) on failure."""
    if path is None:
        path = DEFAULT_SNAPSHOT_PATH
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(params.to_dict(), f, ensure_ascii=False, indent=2)
    except OSError as e:
        print(f"入力データの保存に失敗: {path}: {e}", file=sys.stderr)
        return False
    return True


def load_snapshot(path: Path | None = None) -> InputParameters | None:
    """Restore a saved snapshot. Returns None when nothing usable is stored.

    Individual fields that are missing or invalid fall back to their defaults,
    so a partially broken snapshot still restores.
    """
    if path is None:
        path = DEFAULT_SNAPSHOT_PATH
    if not path.exists():
        return None
    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        print(f"入力データの読み込みに失敗: {path}: {e}", file=sys.stderr)
        return None
    if not isinstance(raw, dict):
        print(f"入力データの形式が不正です: {path}", file=sys.stderr)
        return None
    return from_mapping(raw)
