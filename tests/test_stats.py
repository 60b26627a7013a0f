from __future__ import annotations

import pytest

from tetrus import stats


def test_stats():
    vals = [1, 2, 3]
    assert stats.avg(vals) == 2.0
    assert stats.variance(vals) == pytest.approx(2 / 3)
    assert stats.sd(vals) == pytest.approx((2 / 3) ** 0.5)
    assert stats.summarize(vals) == "2 ± 0.816497"
    assert stats.summarize([5]) == "5 ± 0"
