"""Chart generation for household projection results."""

import platform
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import matplotlib.ticker as ticker

from household_sim_jp.simulation import ProjectionRow

ASSET_COLOR = "#1f77b4"
INCOME_COLOR = "#1f77b4"
BALANCE_COLOR = "#d62728"

EXPENSE_COLORS = {
    "fixed": "#8da0cb",
    "yearly": "#66c2a5",
    "child": "#fc8d62",
}


def _setup_japanese_font():
    """Configure matplotlib to use a Japanese font."""
    system = platform.system()
    if system == "Darwin":
        font_family = "Hiragino Sans"
    elif system == "Linux":
        font_family = "Noto Sans CJK JP"
    else:
        font_family = "sans-serif"
    plt.rcParams["font.family"] = font_family
    plt.rcParams["axes.unicode_minus"] = False


def _format_man_axis(ax: plt.Axes):
    """Show yen on the left axis and 万円 on the right."""
    ax.yaxis.set_major_formatter(
        ticker.FuncFormatter(lambda x, _: f"{x:,.0f}")
    )
    ax_right = ax.secondary_yaxis("right")
    ax_right.yaxis.set_major_formatter(
        ticker.FuncFormatter(lambda x, _: f"{x / 10000:,.0f}万" if x != 0 else "0")
    )
    ax_right.set_ylabel("")


def _save(fig: plt.Figure, output_path: Path, stem: str, name: str) -> Path:
    output_path.mkdir(parents=True, exist_ok=True)
    suffix = f"-{name}" if name else ""
    filepath = output_path / f"{stem}{suffix}.png"
    fig.tight_layout()
    fig.savefig(filepath, dpi=150)
    plt.close(fig)
    return filepath


def plot_assets(rows: list[ProjectionRow], output_path: Path, name: str = "") -> Path:
    """Generate a line chart of cumulative assets with life-event markers.

    Args:
        rows: simulate() result.
        output_path: directory to save the PNG.
        name: optional suffix for the output filename (e.g. "a" → "assets-a.png").

    Returns:
        Path to the generated PNG file.
    """
    if not rows:
        raise ValueError("No rows for asset chart")
    _setup_japanese_font()

    fig, ax = plt.subplots(figsize=(14, 8))
    years = [row.year for row in rows]
    assets = [row.assets for row in rows]
    ax.plot(years, assets, color=ASSET_COLOR, linewidth=2, label="資産残高")
    ax.axhline(0, color="black", linewidth=1.0, zorder=2)

    ax.set_xlabel("年")
    ax.set_ylabel("資産残高（円）")
    ax.set_title(f"資産推移（夫{rows[0].husband_age}歳→{rows[-1].husband_age}歳）")
    ax.legend(loc="upper left")
    ax.grid(True, alpha=0.3)
    _format_man_axis(ax)

    y_lo, y_hi = ax.get_ylim()
    marked = [row for row in rows if row.events]
    for i, row in enumerate(marked):
        ax.axvline(row.year, color="#888888", linewidth=0.7, linestyle=":", alpha=0.4, zorder=3)
        # Alternate y-position across 4 levels in the lower portion
        y_pos = y_lo + (y_hi - y_lo) * (0.05 + 0.07 * (i % 4))
        ax.annotate(
            "・".join(row.events),
            xy=(row.year, y_pos),
            fontsize=9, color="#555555",
            ha="center", va="bottom",
            bbox=dict(boxstyle="round,pad=0.4", fc="white", ec="#888888", alpha=0.9, linewidth=0.8),
            zorder=10,
        )

    return _save(fig, output_path, "assets", name)


def plot_cashflow(rows: list[ProjectionRow], output_path: Path, name: str = "") -> Path:
    """Generate a stacked expense chart against net income and yearly balance."""
    if not rows:
        raise ValueError("No rows for cashflow chart")
    _setup_japanese_font()

    fig, ax = plt.subplots(figsize=(14, 8))
    years = [row.year for row in rows]
    fixed = [row.expense.annual_from_monthly for row in rows]
    yearly = [row.expense.yearly_total for row in rows]
    child = [row.expense.child_total for row in rows]

    ax.stackplot(
        years,
        fixed,
        yearly,
        child,
        labels=["固定費（月額×12）", "年額支出", "子ども費用"],
        colors=[EXPENSE_COLORS["fixed"], EXPENSE_COLORS["yearly"], EXPENSE_COLORS["child"]],
        alpha=0.75,
    )
    ax.plot(years, [row.total_income for row in rows], color=INCOME_COLOR, linewidth=2, label="手取り収入")
    ax.plot(
        years,
        [row.balance for row in rows],
        color=BALANCE_COLOR,
        linewidth=1.8,
        linestyle="--",
        label="年間収支",
    )

    ax.set_title("キャッシュフロー（年次）")
    ax.set_xlabel("年")
    ax.set_ylabel("年額（円）")
    ax.axhline(0, color="black", linewidth=2.0, linestyle="-", zorder=5)
    ax.grid(True, alpha=0.3)
    ax.legend(loc="upper left", fontsize=9)
    _format_man_axis(ax)

    return _save(fig, output_path, "cashflow", name)
