# utils.py
from __future__ import annotations

import os
import json
import uuid
import random
from datetime import datetime, date
from typing import Any, Dict


def now_str() -> str:
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S")


def parse_ts(s: str) -> datetime:
    return datetime.strptime(s, "%Y-%m-%d %H:%M:%S")


def parse_date_yyyy_mm_dd(s: str) -> date:
    # "2026-01-11"
    return datetime.strptime(s.strip(), "%Y-%m-%d").date()


def safe_int(s: Any, default: int = 0) -> int:
    try:
        return int(str(s).strip())
    except (TypeError, ValueError):
        return default


def new_id(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex[:12]}"


def new_order_id() -> int:
    # 5-digit order number
    return random.randint(10000, 99999)


def load_json_or_default(path: str, default: Dict[str, Any]) -> Dict[str, Any]:
    if not os.path.exists(path):
        return default
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def format_money(value: float, *, decimals: int = 2) -> str:
    """
    Comma-grouped amount with a fixed number of decimals.
    Falls back to str(value) when the value is not numeric.
    """
    try:
        return f"{float(value):,.{int(decimals)}f}"
    except (TypeError, ValueError):
        return str(value)
