"""rpg-structures: dev launcher. Runs the CLI without installing the package."""

import sys

from rpg_structures.cli import main

if __name__ == "__main__":
    sys.exit(main())
