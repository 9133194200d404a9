"""Command-line entry point: load a scene file and report the outcome."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from minirt.scene import SceneError, load_scene


def main(argv: Sequence[str] | None = None) -> int:
    """Load the scene named by the single argument; return an exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Invalid number of arguments!")
        return 0
    try:
        load_scene(args[0])
    except SceneError as exc:
        if isinstance(exc.__cause__, OSError):
            print(exc)
            return 0
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print("Finish")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())