"""Maze grids: rows of single-character cells loaded from text."""

from __future__ import annotations

import os
from typing import List

Maze = List[List[str]]


def parse_maze(text: str) -> Maze:
    """Split maze text into rows of cells, one row per line."""
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [list(line[:-1] if line.endswith("\r") else line) for line in lines]


def load_maze(filename: str | os.PathLike[str]) -> Maze:
    """Read a maze file; raises OSError if it cannot be opened."""
    with open(filename, encoding="utf-8", newline="") as handle:
        return parse_maze(handle.read())