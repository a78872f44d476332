"""Layout of the VRAM tile grid and palette grid, and hit testing within them."""

from __future__ import annotations

import enum
import math
from typing import Tuple

_COLUMNS = 16
_ROWS = 64
_TILE_SCALE = 8


class ViewedVramTiles(enum.Enum):
    """Which half of VRAM is shown."""

    ALL = "all"
    BACKGROUND_ONLY = "background_only"
    SPRITES_ONLY = "sprites_only"


class VramSelectionMode(enum.Enum):
    """How many tiles one selection covers."""

    SINGLE_TILE = "single_tile"
    TWO_BY_TWO_TILES = "two_by_two_tiles"


class ViewedPalettes(enum.IntEnum):
    """Which palette rows are shown."""

    ALL = 0
    BACKGROUND_ONLY = 1
    SPRITES_ONLY = 2


def vram_tiles() -> Tuple[Tuple[int, int, int, int], ...]:
    """The 16x64 grid of tiles as (x, y, tile number, params); the lower half are sprite tiles."""
    tiles = []
    for t in range(_COLUMNS * _ROWS):
        pos_x = (t % _COLUMNS) * _TILE_SCALE
        pos_y = (t // _COLUMNS) * _TILE_SCALE
        if t < _COLUMNS * 32:
            tile, pal = t & 0x3FF, 0
        else:
            tile, pal = (t & 0x1FF) + 0x600, 8
        params = _TILE_SCALE | (pal << 8) | (t & 0xC000)
        tiles.append((pos_x, pos_y, tile, params))
    return tuple(tiles)


def view_extent(viewed: ViewedVramTiles, scale: float) -> Tuple[int, Tuple[float, float]]:
    """Height of the view in tiles and the drawing offset for ``scale`` pixels per tile."""
    if viewed is ViewedVramTiles.ALL:
        return 64, (0.0, 0.0)
    if viewed is ViewedVramTiles.BACKGROUND_ONLY:
        return 32, (0.0, 0.0)
    return 32, (0.0, -32.0 * scale)


def hovered_vram_tile(
    rel_x: float, rel_y: float, scale: float, zoom: float, mode: VramSelectionMode
) -> Tuple[int, int]:
    """Tile column and row under a point relative to the view's top left corner."""
    if mode is VramSelectionMode.SINGLE_TILE:
        max_x, max_y = 15.0, 31.0
    else:
        max_x, max_y = 14.0, 30.0
    x = min(max(math.floor(rel_x / scale / zoom), 0.0), max_x)
    y = min(max(math.floor(rel_y / scale / zoom), 0.0), max_y)
    return int(x), int(y)


def palette_row_count(viewed: ViewedPalettes) -> int:
    """Number of palette rows shown; raises ValueError for an unknown selection."""
    selection = ViewedPalettes(viewed)
    if selection is ViewedPalettes.ALL:
        rows = 16
    else:
        rows = 8
    return rows


def hovered_palette_row(rel_y: float, width: float, viewed: ViewedPalettes) -> int:
    """Palette row under a point ``rel_y`` below the top of a view ``width`` wide."""
    cell_width = width / 16.0
    row = math.floor(rel_y / cell_width)
    return int(min(max(row, 0), palette_row_count(viewed) - 1))