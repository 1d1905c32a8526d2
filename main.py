"""Development entry point (no install needed).

Run the CLI with `python main.py all` from a checkout: the packages live under
`src/`, so this script puts that directory on the import path first.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    src = Path(__file__).resolve().parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
