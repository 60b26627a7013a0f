from __future__ import annotations

from typing import Sequence

import numpy as np


def avg(vals: Sequence[float]) -> float:
    return float(np.mean(vals))


def variance(vals: Sequence[float]) -> float:
    # Population variance
    return float(np.var(vals))


def sd(vals: Sequence[float]) -> float:
    return float(np.std(vals))


def summarize(vals: Sequence[float]) -> str:
    return f"{avg(vals):g} ± {sd(vals):g}"
