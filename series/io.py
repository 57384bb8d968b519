"""
Plain-text export of a series: one value per line, fixed six-decimal format.
There is no reader.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Union


def write_file(values: Iterable[float], path: Union[str, Path]) -> Path:
    """Write values to path, one "%f" formatted value per line. Returns the path."""
    path = Path(path)
    with open(path, "w", encoding="utf-8") as fh:
        for x in values:
            fh.write(f"{float(x):f}\n")
    return path
