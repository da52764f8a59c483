"""Per-year child profiles derived from the declared birth-year slots."""

from dataclasses import dataclass

from household_sim_jp.params import InputParameters


@dataclass(frozen=True)
class ChildProfile:
    birth_year: int
    age: int    # 負の値は未出生
    order: int  # 入力欄の位置で決まる出生順（1始まり）

    @property
    def exists(self) -> bool:
        return self.age >= 0


def resolve_children(params: InputParameters, year: int) -> list[ChildProfile]:
    """Return profiles for every declared child slot, in slot order.

    Birth order is the slot position (1, 2, 3), not the chronological order of
    birth years. Undeclared slots (birth year 0) are skipped; a child whose age is
    negative is still returned and must be ignored by cost/benefit rules.
    """
    return [
        ChildProfile(birth_year=birth_year, age=year - birth_year, order=slot)
        for slot, birth_year in enumerate(params.child_birth_years, start=1)
        if birth_year
    ]
