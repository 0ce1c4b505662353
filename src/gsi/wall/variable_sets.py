"""Variable-set ids accepted by the wall state setters and getters."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable


class VariableSet(IntEnum):
    P_T = 0
    RHOI_T = 1

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    VariableSet.P_T: "(pressure, temperature)",
    VariableSet.RHOI_T: "(species densities, temperature)",
}


def describe_choices(allowed: Iterable[VariableSet]) -> str:
    return "".join(f"  {int(var)}: {var.description}\n" for var in sorted(allowed))
