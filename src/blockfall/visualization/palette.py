from __future__ import annotations

from typing import Dict, Tuple

from blockfall.game import Color


RGB = Tuple[int, int, int]

BACKGROUND: RGB = (30, 30, 36)

COLOR_RGB: Dict[int, RGB] = {
    0: BACKGROUND,
    int(Color.CYAN): (0, 240, 240),
    int(Color.YELLOW): (240, 240, 0),
    int(Color.PURPLE): (160, 0, 240),
    int(Color.ORANGE): (240, 160, 0),
    int(Color.BLUE): (0, 0, 240),
    int(Color.RED): (240, 0, 0),
    int(Color.GREEN): (0, 240, 0),
}


def color_for_value(v: int) -> RGB:
    # Falling piece cells are stored negated
    return COLOR_RGB.get(abs(int(v)), (200, 200, 200))
