"""Ejecuta togglcsv desde un checkout, sin `pip install`.

    python main.py export 2024-01-01 2024-03-31 > records.csv
    python main.py import records.csv

El código vive en `src/`, así que se añade al path antes de importar la CLI.
"""

from __future__ import annotations

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src"


if __name__ == "__main__":
    if str(SRC_DIR) not in sys.path:
        sys.path.insert(0, str(SRC_DIR))

    from cli.main import run  # noqa: PLC0415

    run()
