# charts.py
from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Tuple

from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure

from inventory import Inventory
from utils import parse_date_yyyy_mm_dd, parse_ts


def _new_figure() -> Figure:
    fig = Figure(figsize=(10, 5), dpi=100)
    FigureCanvasAgg(fig)
    return fig


def plot_stock_levels(inventory: Inventory, path: str, threshold: Optional[int] = None) -> str:
    """Bar chart of current stock per item, restock threshold drawn as a line."""
    if threshold is None:
        threshold = inventory.restock_threshold

    fig = _new_figure()
    ax = fig.add_subplot(111)

    names = [it.name for it in inventory]
    qtys = [it.quantity for it in inventory]
    colors = ["tab:red" if q < threshold else "tab:blue" for q in qtys]

    if not names:
        ax.set_title("No items in inventory")
        fig.savefig(path)
        return path

    ax.bar(names, qtys, color=colors)
    ax.axhline(threshold, color="tab:gray", linestyle="--", label=f"Restock below {threshold}")
    ax.legend()
    ax.set_title("Current stock")
    ax.set_xlabel("Item")
    ax.set_ylabel("Quantity")
    fig.autofmt_xdate()
    fig.savefig(path)
    return path


def _history_points(inventory: Inventory, item_id: int,
                    start: Optional[str] = None, end: Optional[str] = None) -> Tuple[List[datetime], List[int]]:
    start_d = parse_date_yyyy_mm_dd(start) if start else None
    end_d = parse_date_yyyy_mm_dd(end) if end else None

    xs, ys = [], []
    for r in inventory.list_movements(item_id):
        dt = parse_ts(r["ts"])
        if start_d and dt.date() < start_d:
            continue
        if end_d and dt.date() > end_d:
            continue
        xs.append(dt)
        ys.append(r["quantity_after"])
    return xs, ys


def plot_stock_history(inventory: Inventory, item_id: int, path: str,
                       start: Optional[str] = None, end: Optional[str] = None) -> str:
    it = inventory.search_item_by_id(item_id)
    if it is None:
        raise ValueError(f"No item found with id '{item_id}'")

    xs, ys = _history_points(inventory, item_id, start, end)

    fig = _new_figure()
    ax = fig.add_subplot(111)
    ax.plot(xs, ys, marker="o")
    ax.set_title(f"Stock history: {it.name} ({it.id})")
    ax.set_xlabel("Time")
    ax.set_ylabel("Quantity")
    fig.autofmt_xdate()
    fig.savefig(path)
    return path
