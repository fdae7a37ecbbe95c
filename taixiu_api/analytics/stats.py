from typing import Sequence

from taixiu_api.core.labels import TAI
from taixiu_api.core.models import OutcomeRecord


def half_up(x: float) -> int:
    # round() is banker's rounding; scores round .5 upwards
    return int(x + 0.5) if x >= 0 else -int(-x + 0.5)


def distribution(records: Sequence[OutcomeRecord]) -> dict:
    n = len(records)
    n_tai = sum(1 for r in records if r.result == TAI)
    n_xiu = n - n_tai
    return {
        "tai_percent": n_tai / n * 100 if n else 0.0,
        "xiu_percent": n_xiu / n * 100 if n else 0.0,
        "tai_count": n_tai,
        "xiu_count": n_xiu,
        "total": n,
    }


def dice_patterns(records: Sequence[OutcomeRecord], size: int = 10) -> dict:
    recent = records[:size]
    faces = [d for r in recent for d in r.dice]
    high = sum(1 for d in faces if d >= 4)
    low = len(faces) - high
    avg = sum(r.total for r in recent) / len(recent) if recent else 0.0
    return {
        "high_dice_ratio": high / len(faces) if faces else 0.0,
        "low_dice_ratio": low / len(faces) if faces else 0.0,
        "average_sum": avg,
        "sum_trend": "high" if avg > 10.5 else "low",
    }


def sum_trend(records: Sequence[OutcomeRecord], size: int = 15) -> dict:
    """Count rising vs falling steps across the latest `size` sums.

    Pairs are compared in list order (newest first), so `increasing` counts
    positions where a round's sum is below the round before it in time.
    """
    sums = [r.total for r in records[:size]]
    inc = dec = 0
    for a, b in zip(sums, sums[1:]):
        if a > b:
            dec += 1
        elif a < b:
            inc += 1
    strength = abs(inc - dec) / (len(sums) - 1) if len(sums) > 1 else 0.0
    return {
        "trend": "increasing" if inc > dec else "decreasing",
        "strength": strength,
        "increasing": inc,
        "decreasing": dec,
    }
