import logging
import random
from dataclasses import dataclass, field
from typing import Protocol, Sequence

from taixiu_api.analytics import patterns, stats
from taixiu_api.core.labels import TAI, XIU, display, opposite
from taixiu_api.core.models import OutcomeRecord

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    def random(self) -> float: ...


@dataclass(frozen=True)
class Prediction:
    label: str  # 'tai' | 'xiu'
    confidence: int
    factors: tuple[str, ...] = ()
    analysis: dict = field(default_factory=dict)


class PredictionEngine:
    """Fold of heuristic pattern detectors over the latest rounds.

    Streak, 1-1 alternation, 2-2 pairs and a leading triple always replace the
    current guess when they fire; every later detector only fills an empty
    guess. Each firing detector adds to the score, which is jittered, rounded
    and clamped into [min_confidence, max_confidence].
    """

    def __init__(self, window: int = 50, base_confidence: int = 50,
                 min_confidence: int = 50, max_confidence: int = 85,
                 jitter: float = 3, rng: RandomSource | None = None):
        self.window = window
        self.base = base_confidence
        self.lo = min_confidence
        self.hi = max_confidence
        self.jitter = jitter
        self.rng = rng if rng is not None else random.Random()

    def predict(self, records: Sequence[OutcomeRecord]) -> Prediction:
        if not records:
            raise ValueError("at least one round is required")
        recent = list(records[:self.window])
        labels = [r.result for r in recent]

        guess = None
        score = self.base
        factors = []

        st = patterns.streak(labels)
        if st["length"] >= 4:
            guess = opposite(st["type"])
            score += min(st["length"] * 3, 15)
            factors.append(f"Cầu bệt {st['length']} phiên")

        alt = patterns.alternating(labels)
        if alt["is_alternating"]:
            guess = opposite(labels[0])
            score += min(alt["length"] * 2, 10)
            factors.append(f"Cầu 1-1 ({alt['length']} phiên)")

        dp = patterns.double_pairs(labels)
        if dp["is_double_pair"]:
            guess = labels[0]
            score += 8
            factors.append(f"Cầu 2-2 ({dp['pair_count']} cặp)")

        tr = patterns.triple(labels)
        if tr["has_triple"] and tr["position"] == 0:
            guess = opposite(tr["type"])
            score += 12
            factors.append("Cầu 3 phiên liên tiếp")

        dist = stats.distribution(recent)
        if abs(dist["tai_percent"] - 50) > 15:
            dominant = TAI if dist["tai_percent"] > 50 else XIU
            guess = guess or opposite(dominant)
            score += 5
            factors.append(f"Phân bố lệch ({display(dominant)}: {dist['tai_percent']:.1f}%)")

        dice = stats.dice_patterns(recent)
        if dice["average_sum"] > 11.5:
            guess = guess or XIU
            score += 3
            factors.append(f"Tổng trung bình cao ({dice['average_sum']:.1f})")
        elif dice["average_sum"] < 9.5:
            guess = guess or TAI
            score += 3
            factors.append(f"Tổng trung bình thấp ({dice['average_sum']:.1f})")

        trend = stats.sum_trend(recent)
        if trend["strength"] > 0.4:
            rising = trend["trend"] == "increasing"
            guess = guess or (TAI if rising else XIU)
            score += stats.half_up(trend["strength"] * 5)
            factors.append(f"Xu hướng tổng {'tăng' if rising else 'giảm'}")

        w5 = patterns.recent_window(labels, 5)
        w10 = patterns.recent_window(labels, 10)
        if abs(w5["tai_ratio"] - w10["tai_ratio"]) > 0.3:
            guess = guess or opposite(w5["dominant"])
            score += 4
            factors.append("Biến động ngắn hạn")

        br = patterns.bridge(labels)
        if br["has_bridge"]:
            guess = guess or br["next_likely"]
            score += 6
            factors.append("Cầu cầu đảo")

        zz = patterns.zigzag_break(labels)
        if zz["has_zigzag_break"]:
            guess = guess or zz["break_direction"]
            score += 5
            factors.append("Phá cầu zigzag")

        if not guess:
            n_tai = sum(1 for lab in labels[:3] if lab == TAI)
            guess = XIU if n_tai >= 2 else TAI
            factors.append("Phân tích mặc định")

        noise = self.rng.random() * 2 * self.jitter - self.jitter
        confidence = max(self.lo, min(self.hi, stats.half_up(score + noise)))
        logger.debug("prediction %s score=%s noise=%.2f -> %s%%", guess, score, noise, confidence)

        return Prediction(
            label=guess,
            confidence=confidence,
            factors=tuple(factors),
            analysis={
                "streak": st,
                "alternating": alt,
                "double_pairs": dp,
                "triple": tr,
                "distribution": dist,
                "dice_patterns": dice,
                "sum_trend": trend,
                "bridge": br,
                "zigzag_break": zz,
            },
        )
