"""
Series package — ordered float sequences and batch statistics over them.

  series.py — Series type plus location, dispersion, co-movement, algebra and shape functions
  io.py     — flat one-value-per-line export
"""

from .io import write_file
from .series import (
    Series,
    add,
    add1,
    autocorr,
    autocov,
    div,
    div1,
    fold,
    head,
    map2,
    map_series,
    maximum,
    mean,
    median,
    minimum,
    mul,
    mul1,
    pcorr,
    pcovar,
    pskew,
    pstd,
    pvar,
    resize,
    scorr,
    scovar,
    sskew,
    sstd,
    sub,
    sub1,
    svar,
    tail,
)

__all__ = [
    "Series",
    "write_file",
    "maximum",
    "minimum",
    "mean",
    "median",
    "svar",
    "pvar",
    "sstd",
    "pstd",
    "sskew",
    "pskew",
    "scovar",
    "pcovar",
    "scorr",
    "pcorr",
    "autocov",
    "autocorr",
    "map_series",
    "map2",
    "add",
    "sub",
    "mul",
    "div",
    "add1",
    "sub1",
    "mul1",
    "div1",
    "resize",
    "fold",
    "head",
    "tail",
]
