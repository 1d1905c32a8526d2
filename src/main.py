"""Script de ejecución.

Permite `python -m main ...` desde `src/` además del script `solid-demos`.
"""

from __future__ import annotations

import sys

# The banner and section headers use non-ASCII characters (cp1252 consoles).
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
