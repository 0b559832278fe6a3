"""Rendering seat layouts to images."""

from typing import List, Sequence

import numpy as np

from .layout import SeatLayout, Tile

# RGB color per tile value
PALETTE = {
    Tile.FLOOR: (20, 20, 30),       # Dark
    Tile.EMPTY: (0, 212, 255),      # Cyan
    Tile.OCCUPIED: (255, 107, 107), # Coral
}


def render_layout(layout: SeatLayout, cell_size: int = 4) -> np.ndarray:
    """Render a layout as an RGB image array."""
    grid = layout.tiles
    h, w = grid.shape
    img = np.zeros((h * cell_size, w * cell_size, 3), dtype=np.uint8)

    for tile, color in PALETTE.items():
        mask = grid == tile
        upscaled = np.repeat(np.repeat(mask, cell_size, axis=0), cell_size, axis=1)
        img[upscaled] = np.array(color, dtype=np.uint8)

    return img


def save_image(layout: SeatLayout, filepath: str, cell_size: int = 4):
    """Save a layout as PNG."""
    from PIL import Image
    Image.fromarray(render_layout(layout, cell_size)).save(filepath)


def save_animation(
    history: Sequence[SeatLayout],
    filepath: str,
    cell_size: int = 4,
    duration: int = 200,
    loop: int = 0,
):
    """Save the generations of a run as an animated GIF."""
    from PIL import Image
    frames: List = [Image.fromarray(render_layout(layout, cell_size)) for layout in history]

    if frames:
        frames[0].save(
            filepath,
            save_all=True,
            append_images=frames[1:],
            duration=duration,
            loop=loop,
        )
