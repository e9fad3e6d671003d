from __future__ import annotations

from _infra import Tile, banner, run

from skink import cycle, product, range, tap, to_list, zip


def main() -> None:
    banner("02_tile_grid: product drives a grid, cycle paints it")

    width, height = 4, 3
    coords = product(range(height), range(width))
    colours = cycle(["red", "green", "blue"])

    drawn: list[Tile] = []
    tiles = tap(
        (Tile(x, y, colour) for (y, x), colour in zip(coords, colours)),
        effect=drawn.append,
    )
    to_list(tiles)

    for row in range(height):
        print("".join(str(t) for t in drawn if t.y == row))


if __name__ == "__main__":
    run(main)
