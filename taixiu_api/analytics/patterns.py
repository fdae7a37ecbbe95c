from typing import Sequence

from taixiu_api.core.labels import TAI, XIU

# All detectors read labels most-recent-first: labels[0] is the latest round.


def streak(labels: Sequence[str]) -> dict:
    if len(labels) < 2:
        return {"type": "none", "length": 0}
    cur = labels[0]
    length = 1
    for lab in labels[1:]:
        if lab != cur:
            break
        length += 1
    return {"type": cur, "length": length}


def alternating(labels: Sequence[str]) -> dict:
    if len(labels) < 4:
        return {"is_alternating": False, "length": 0}
    length = 1
    for i in range(1, len(labels)):
        if labels[i] == labels[i-1]:
            break
        length += 1
    return {"is_alternating": length >= 4, "length": length}


def double_pairs(labels: Sequence[str]) -> dict:
    if len(labels) < 8:
        return {"is_double_pair": False, "pair_count": 0}
    pairs = 0
    i = 0
    while i < len(labels) - 1 and labels[i] == labels[i+1]:
        pairs += 1
        i += 2
    return {"is_double_pair": pairs >= 2, "pair_count": pairs}


def triple(labels: Sequence[str]) -> dict:
    if len(labels) < 6:
        return {"has_triple": False}
    for i in range(len(labels) - 2):
        if labels[i] == labels[i+1] == labels[i+2]:
            return {"has_triple": True, "position": i, "type": labels[i]}
    return {"has_triple": False}


def recent_window(labels: Sequence[str], size: int) -> dict:
    # ratios use the nominal size even when fewer labels are available
    n_tai = sum(1 for lab in labels[:size] if lab == TAI)
    return {
        "tai_ratio": n_tai / size,
        "xiu_ratio": (size - n_tai) / size,
        "dominant": TAI if n_tai > size / 2 else XIU,
    }


def bridge(labels: Sequence[str]) -> dict:
    if len(labels) < 6:
        return {"has_bridge": False}
    p = labels[:6]
    if p[0] == p[1] and p[2] != p[1] and p[3] == p[2] and p[4] != p[3]:
        return {"has_bridge": True, "next_likely": p[0]}
    return {"has_bridge": False}


def zigzag_break(labels: Sequence[str]) -> dict:
    if len(labels) < 5:
        return {"has_zigzag_break": False}
    flips = sum(1 for i in range(4) if labels[i] != labels[i+1])
    if flips >= 3 and labels[0] == labels[1]:
        return {"has_zigzag_break": True, "break_direction": labels[0]}
    return {"has_zigzag_break": False}
