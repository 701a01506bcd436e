"""Recolor a procedural height map with a terrain color transition.

Run with:
    python examples/recolor_heightmap.py [output.png]

Needs the ``examples`` extra (Pillow) to write the image.
"""
import sys

import numpy as np
from PIL import Image

from colortransition import ColorTransition, configure_logging


def make_heightmap(size: int = 256, octaves: int = 5, seed: int = 0) -> np.ndarray:
    """Sum of upscaled random grids, normalized to uint8."""
    rng = np.random.default_rng(seed)
    height = np.zeros((size, size), dtype=float)
    amplitude = 1.0
    for octave in range(octaves):
        cells = 2 ** (octave + 2)
        grid = rng.random((cells, cells))
        repeat = size // cells
        height += amplitude * np.kron(grid, np.ones((repeat, repeat)))[:size, :size]
        amplitude /= 2
    height -= height.min()
    height /= height.max()
    return np.round(height * 255).astype(np.uint8)


def terrain_transition() -> ColorTransition:
    t = ColorTransition()
    t.add_point(0, 0, 0, 90)         # deep water
    t.add_point(100, 30, 110, 200)   # shallow water
    t.add_point(110, 230, 215, 140)  # beach
    t.add_point(130, 60, 160, 50)    # grass
    t.add_point(190, 110, 90, 60)    # rock
    t.add_point(230, 255, 255, 255)  # snow
    return t


def main() -> None:
    configure_logging()
    output = sys.argv[1] if len(sys.argv) > 1 else "terrain.png"

    transition = terrain_transition()
    print("Transition:", transition.to_string())
    print("Color at 120:", transition.get_color(120))

    rgb = transition.apply(make_heightmap())
    Image.fromarray(rgb).save(output)
    print("Wrote", output, rgb.shape)

    transition.save_to_file("terrain_transition.txt")


if __name__ == "__main__":
    main()
