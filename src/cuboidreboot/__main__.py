"""Command-line interface."""
import sys

from cuboidreboot.main import main

if __name__ == "__main__":
    sys.exit(main())
