"""Entrypoint for packaged builds. PyInstaller runs this; it starts the CLI demo."""
import sys

# Import main directly so the frozen bundle does not rely on the console script.
from ledger.main import main


if __name__ == "__main__":
    sys.exit(main())
