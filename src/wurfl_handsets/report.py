"""
Rich tables for inspecting handset inheritance.

Owners are shown next to every value so inherited capabilities are easy to
tell apart from local overrides.
"""

from __future__ import annotations

from typing import Iterable, Optional

from rich.console import Console
from rich.table import Table

from wurfl_handsets.handsets.capability import CapabilitySource
from wurfl_handsets.handsets.handset import Handset


def _cell(value: object) -> str:
    return "-" if value is None else str(value)


def capability_table(handset: Handset, keys: Optional[Iterable[str]] = None) -> Table:
    """Resolved capabilities of ``handset`` with the id that supplied each one."""
    table = Table(title=f"Capabilities of {handset.wurfl_id}")
    table.add_column("Capability", style="bold")
    table.add_column("Value")
    table.add_column("Owner")

    for key in sorted(handset.keys() if keys is None else keys):
        value, owner = handset.get_with_owner(key)
        owner_cell = _cell(owner)
        if owner is not None and owner != handset.wurfl_id:
            owner_cell = f"[dim]{owner_cell}[/dim]"
        table.add_row(key, _cell(value), owner_cell)

    return table


def difference_table(handset: Handset, other: CapabilitySource) -> Table:
    other_id = getattr(other, "wurfl_id", "fallback")
    table = Table(title=f"{handset.wurfl_id} vs {other_id}")
    table.add_column("Capability", style="bold")
    table.add_column("Local value")
    table.add_column(f"{other_id} value")
    table.add_column("Owner")

    for diff in handset.compare(other):
        table.add_row(
            diff.key,
            _cell(handset.overrides.get(diff.key)),
            _cell(diff.value),
            _cell(diff.owner),
        )

    return table


def print_table(table: Table, console: Optional[Console] = None) -> None:
    (console or Console()).print(table)
