# app.py
import sys
from pathlib import Path

from logging_config import setup_logging
from store import load_shop

APP_TITLE = "Tool Shop"


def get_data_file_path(filename: str = "tool_shop.json") -> str:
    """
    Default shop file: the one next to app.py
    (or next to the executable when frozen).
    """
    if getattr(sys, "frozen", False):
        base_dir = Path(sys.executable).resolve().parent
    else:
        base_dir = Path(__file__).resolve().parent
    return str(base_dir / filename)


DATA_FILE = get_data_file_path()


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    setup_logging()

    path = argv[0] if argv else DATA_FILE
    try:
        shop = load_shop(path)
    except ValueError as e:
        print(f"{APP_TITLE}: could not load {path}: {e}", file=sys.stderr)
        return 1

    print(f"== {APP_TITLE} ==")
    print(shop.list_all_items())
    print(shop.get_inventory_value())
    print()
    print(shop.get_order())
    return 0


if __name__ == "__main__":
    sys.exit(main())
