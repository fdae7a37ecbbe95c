import unicodedata
from enum import Enum

TAI = "tai"
XIU = "xiu"

_ALIASES = {
    "tai": TAI, "t": TAI,
    "xiu": XIU, "x": XIU,
}


def normalize_label(raw: str) -> str:
    """Map an upstream result label ('Tài', 'xỉu', 'TAI', 'X', ...) to 'tai' / 'xiu'."""
    if not isinstance(raw, str):
        raise ValueError(f"label must be a string, got {raw!r}")
    t = unicodedata.normalize("NFD", raw.strip().lower().replace("đ", "d"))
    t = "".join(c for c in t if not unicodedata.combining(c))
    if t not in _ALIASES:
        raise ValueError(f"unknown result label: {raw!r}")
    return _ALIASES[t]


def opposite(label: str) -> str:
    return XIU if label == TAI else TAI


def display(label: str) -> str:
    return "Tài" if label == TAI else "Xỉu"


class FeedType(str, Enum):
    hu = "hu"
    md5 = "md5"

    @property
    def upstream_key(self) -> str:
        # array name in the upstream history document
        return "taixiu" if self is FeedType.hu else "taixiumd5"

    @property
    def display_name(self) -> str:
        return "Tài Xỉu Hũ" if self is FeedType.hu else "Tài Xỉu MD5"
