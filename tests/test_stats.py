from taixiu_api.analytics.stats import dice_patterns, distribution, half_up, sum_trend


def test_half_up():
    assert half_up(2.5) == 3 and half_up(2.4) == 2 and half_up(62.994) == 63
    assert half_up(-2.5) == -3


def test_distribution(make_records):
    out = distribution(make_records("TTTXTTTXTT"))
    assert out["tai_count"] == 8 and out["xiu_count"] == 2 and out["total"] == 10
    assert abs(out["tai_percent"] - 80.0) < 1e-9


def test_dice_patterns_uses_latest_ten(make_records):
    recs = make_records("TTTTTTTTTTXX", totals=[18] * 10 + [3, 3])
    out = dice_patterns(recs)
    assert out["average_sum"] == 18 and out["sum_trend"] == "high"
    assert out["high_dice_ratio"] == 1.0 and out["low_dice_ratio"] == 0.0


def test_sum_trend(make_records):
    # newest first: each step compared against the round before it in the list
    recs = make_records("XXXXX", totals=[4, 5, 6, 7, 8])
    out = sum_trend(recs)
    assert out["trend"] == "increasing" and out["increasing"] == 4 and out["strength"] == 1.0

    flat = sum_trend(make_records("TTTT", totals=[11, 11, 11, 11]))
    assert flat["strength"] == 0 and flat["trend"] == "decreasing"


def test_sum_trend_single_round(make_records):
    out = sum_trend(make_records("T"))
    assert out["strength"] == 0.0
