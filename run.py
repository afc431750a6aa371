#!/usr/bin/env python3
"""Run the vote tracker dashboard. Extra arguments are passed to streamlit."""

import subprocess
import sys
from pathlib import Path

APP = Path(__file__).parent / "web" / "streamlit" / "app.py"


def main() -> int:
    return subprocess.run([sys.executable, "-m", "streamlit", "run", str(APP), *sys.argv[1:]]).returncode


if __name__ == "__main__":
    sys.exit(main())
