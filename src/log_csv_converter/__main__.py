"""Module entrypoint.

Allows:
    python -m log_csv_converter
"""

from __future__ import annotations

from log_csv_converter.cli import main

if __name__ == "__main__":
    main()
