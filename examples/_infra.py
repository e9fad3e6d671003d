from __future__ import annotations

import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class Tile:
    x: int
    y: int
    colour: str

    def __str__(self) -> str:  # pragma: no cover (examples only)
        return f"{self.colour[0]}"


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], None]) -> None:  # pragma: no cover (examples only)
    main()
