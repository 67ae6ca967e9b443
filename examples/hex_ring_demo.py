"""Draw a ring and a disk on a small wrapped map with rich."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from hexworld import HexCoord, MapSettings, RelativeHexCoord

settings = MapSettings(width=11, height=7, wrap_x=True)
context = settings.to_context()
center = HexCoord(1, 3)


def render(ring: set[HexCoord | None], disk: set[HexCoord | None]) -> Text:
    text = Text()
    for r in range(context.height + 1):
        text.append(" " * r)
        for q in range(context.width + 1):
            cell = HexCoord(q, r)
            if cell == center:
                text.append("@ ", style="bold yellow")
            elif cell in ring:
                text.append("o ", style="cyan")
            elif cell in disk:
                text.append("* ", style="green")
            else:
                text.append(". ", style="dim")
        text.append("\n")
    return text


if __name__ == "__main__":
    ring = {center.offset_by(o, context) for o in RelativeHexCoord.iter_neighbors_ring(3)}
    disk = {center.offset_by(o, context) for o in RelativeHexCoord.iter_neighbors(2)}
    on_map = len(ring - {None}), len(disk - {None})
    console = Console()
    console.print(render(ring, disk))
    console.print(f"ring cells on map: {on_map[0]}, disk cells on map: {on_map[1]}")
