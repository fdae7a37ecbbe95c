import pytest

from taixiu_api.core.models import OutcomeRecord

_UPSTREAM_LABEL = {"T": "Tài", "X": "Xỉu"}
_DEFAULT_TOTAL = {"T": 11, "X": 10}


def _faces(total: int):
    faces = [1, 1, 1]
    rest = total - 3
    for i in range(3):
        step = min(5, rest)
        faces[i] += step
        rest -= step
    return faces


def raw_round(phien: int, label: str, total: int | None = None) -> dict:
    total = total if total is not None else _DEFAULT_TOTAL[label]
    d1, d2, d3 = _faces(total)
    return {"Phien": phien, "Ket_qua": _UPSTREAM_LABEL[label],
            "Xuc_xac_1": d1, "Xuc_xac_2": d2, "Xuc_xac_3": d3, "Tong": total}


def raw_rounds(labels: str, totals=None, latest: int = 1000) -> list[dict]:
    """Upstream-shaped rounds, newest first: labels[0] is round `latest`."""
    totals = totals or [None] * len(labels)
    return [raw_round(latest - i, lab, tot) for i, (lab, tot) in enumerate(zip(labels, totals))]


class FixedRandom:
    def __init__(self, value: float = 0.5):
        self.value = value

    def random(self) -> float:
        return self.value


@pytest.fixture
def make_records():
    def _make(labels: str, totals=None, latest: int = 1000):
        return [OutcomeRecord.model_validate(r) for r in raw_rounds(labels, totals, latest)]
    return _make
