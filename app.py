"""
Plate Layout Generator — Flask Application
==========================================
JSON API around a single in-process PlateLayoutGenerator, for workflows that
drive a liquid handler one well (or one group of wells) at a time.
"""
from __future__ import annotations
import sys
import os
sys.path.insert(0, os.path.dirname(__file__))

from flask import Flask, request, jsonify
from typing import Optional

from platelayout import config
from platelayout.generator import PlateLayoutGenerator
from platelayout.logger import setup_logger, get_logger
from platelayout.plate import well_name
from platelayout.strategies import list_strategies

setup_logger()
logger = get_logger("app")

app = Flask(__name__)

# ── In-memory state (single-session) ─────────────────────────────────────────
_generator: Optional[PlateLayoutGenerator] = None


def _no_generator():
    return jsonify({"error": "No generator loaded"}), 404


def _column_arg(d: dict):
    """Read the optional 'column' field; raises ValueError if not an integer."""
    column = d.get("column")
    if column is None:
        return None
    if isinstance(column, bool) or not isinstance(column, int):
        raise ValueError(f"Column must be an integer, got {column!r}")
    return column


# ── Strategies ───────────────────────────────────────────────────────────────

@app.route("/api/strategies", methods=["GET"])
def get_strategies():
    return jsonify({"strategies": list_strategies(), "default": config.DEFAULT_STRATEGY})


# ── Generator ────────────────────────────────────────────────────────────────

@app.route("/api/generator", methods=["GET"])
def get_generator():
    if _generator is None:
        return _no_generator()
    return jsonify(_generator.to_dict())


@app.route("/api/generator", methods=["POST"])
def build_generator():
    """
    Build a new generator, replacing the current one.
    Body JSON:
      group_size: int (default PLATELAYOUT_GROUP_SIZE)
      strategy:   string (default PLATELAYOUT_STRATEGY)
      dimensions: [rows, columns] (default [PLATELAYOUT_ROWS, PLATELAYOUT_COLUMNS])
    """
    global _generator
    d = request.get_json(silent=True) or {}
    try:
        _generator = PlateLayoutGenerator(
            group_size=d.get("group_size"),
            strategy=d.get("strategy"),
            dimensions=d.get("dimensions"),
        )
    except ValueError as e:
        logger.warning(f"Rejected generator request {d}: {e}")
        return jsonify({"error": str(e)}), 400
    logger.info(f"Generator ready: {_generator.strategy.value}, "
                f"{len(_generator)} wells, group size {_generator.group_size}")
    return jsonify({"ok": True, "generator": _generator.to_dict()})


@app.route("/api/generator/clear", methods=["POST"])
def clear_generator():
    global _generator
    _generator = None
    return jsonify({"ok": True})


@app.route("/api/generator/next", methods=["POST"])
def take_next():
    if _generator is None:
        return _no_generator()
    try:
        column = _column_arg(request.get_json(silent=True) or {})
    except ValueError as e:
        return jsonify({"error": str(e)}), 400
    well = _generator.take_next(column=column)
    return jsonify({
        "well": list(well) if well else None,
        "name": well_name(*well) if well else None,
        "n_remaining": len(_generator),
    })


@app.route("/api/generator/next_group", methods=["POST"])
def take_next_group():
    if _generator is None:
        return _no_generator()
    try:
        column = _column_arg(request.get_json(silent=True) or {})
    except ValueError as e:
        return jsonify({"error": str(e)}), 400
    group = _generator.take_next_group(column=column)
    return jsonify({
        "wells": [list(w) for w in group],
        "names": [well_name(*w) for w in group],
        "n_remaining": len(_generator),
    })


@app.route("/api/generator/iterate_column", methods=["POST"])
def iterate_column():
    if _generator is None:
        return _no_generator()
    try:
        column = _column_arg(request.get_json(silent=True) or {})
    except ValueError as e:
        return jsonify({"error": str(e)}), 400
    return jsonify({"column": _generator.iterate_column(column)})


@app.route("/api/generator/order_map", methods=["GET"])
def order_map():
    if _generator is None:
        return _no_generator()
    grid = _generator.order_map()
    return jsonify({"data": grid.tolist(), "rows": int(grid.shape[0]),
                    "columns": int(grid.shape[1])})


if __name__ == "__main__":
    app.run(debug=config.DEBUG, port=config.PORT)
