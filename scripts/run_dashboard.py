from pathlib import Path
import sys

# Ensure project root on sys.path for direct script execution
root = Path(__file__).resolve().parents[1]
if str(root) not in sys.path:
    sys.path.insert(0, str(root))

from stundenplan.cli.main import build_dashboard


def main() -> None:
    text, _ = build_dashboard(root)
    print(text)


if __name__ == "__main__":
    # The Typer app is available via `python -m stundenplan.cli.main` too.
    main()
