"""Simple configuration loader for kinship_py.

Behavior:
- Load defaults.
- If environment variable `KINSHIP_CONFIG` is set, load that JSON file and merge.
- Environment variables override file values (variables: KINSHIP_ABBR, KINSHIP_TABLE).

A relationship table file is JSON of the form {"m": [[...], ...], "f": [[...], ...]}
with null for cells that should be generated.
"""
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import json
import logging
import os
from typing import Dict, List, Optional

from .labels import DEFAULT_ABBR


@dataclass
class Config:
    abbr: int = DEFAULT_ABBR
    table_path: Optional[Path] = None


def _load_json_file(path: Path) -> Optional[dict]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError):
        logging.warning("Could not read JSON config %s", str(path))
        return None


def _parse_abbr(value) -> int:
    abbr = int(value)
    if abbr < 0:
        raise ValueError("abbr must be >= 0")
    return abbr


def load_config(config_path: Optional[str] = None) -> Config:
    """Load configuration from (1) defaults, (2) JSON file, (3) env vars.

    :param config_path: optional path to a JSON config file. If not provided
                        will use environment variable `KINSHIP_CONFIG` if set.
    """
    cfg = Config()

    cp = config_path or os.environ.get("KINSHIP_CONFIG")
    if cp:
        data = _load_json_file(Path(cp))
        if isinstance(data, dict):
            logging.info("Loaded kinship config from %s", cp)
            if data.get("abbr") is not None:
                cfg.abbr = _parse_abbr(data["abbr"])
            if data.get("table_path"):
                cfg.table_path = Path(data["table_path"])

    # an explicit config_path is authoritative, env vars only apply otherwise
    if config_path is None:
        if os.environ.get("KINSHIP_ABBR"):
            cfg.abbr = _parse_abbr(os.environ["KINSHIP_ABBR"])
        if os.environ.get("KINSHIP_TABLE"):
            cfg.table_path = Path(os.environ["KINSHIP_TABLE"])

    return cfg


def load_relationship_table(path: Path) -> Dict[str, List[List[Optional[str]]]]:
    """Read a relationship table from a JSON file.

    Raises ValueError when the file is not a mapping of gender -> rows.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"relationship table {path} must be a JSON object")
    table: Dict[str, List[List[Optional[str]]]] = {}
    for gender, rows in data.items():
        if not isinstance(rows, list) or not all(isinstance(r, list) for r in rows):
            raise ValueError(f"relationship table {path}: rows for {gender!r} must be a list of lists")
        table[gender.lower()] = [[cell if cell else None for cell in row] for row in rows]
    return table
