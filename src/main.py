"""Entry point kept minimal by delegating to Engine.

Asset failures are fatal: the message goes to stderr and the process exits
with status 1 before the frame loop starts.
"""

import sys

import pygame

from core.engine import Engine
from core.errors import AssetLoadError


def main() -> int:
    try:
        engine = Engine()
    except AssetLoadError as e:
        print(f"[Assets] {e}", file=sys.stderr)
        pygame.quit()
        return 1
    engine.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
