import pytest

from taixiu_api.core.labels import TAI, XIU, FeedType, normalize_label, opposite
from taixiu_api.core.models import OutcomeRecord


@pytest.mark.parametrize("raw", ["Tài", "tài", "TÀI", "tai", "TAI", " T "])
def test_tai_variants(raw):
    assert normalize_label(raw) == TAI


@pytest.mark.parametrize("raw", ["Xỉu", "xỉu", "XỈU", "xiu", "X"])
def test_xiu_variants(raw):
    assert normalize_label(raw) == XIU


@pytest.mark.parametrize("raw", ["", "hoà", "banker", None])
def test_unknown_label(raw):
    with pytest.raises(ValueError):
        normalize_label(raw)


def test_opposite():
    assert opposite(TAI) == XIU and opposite(XIU) == TAI


def test_feed_keys():
    assert FeedType.hu.upstream_key == "taixiu"
    assert FeedType.md5.upstream_key == "taixiumd5"
    assert FeedType("md5").display_name == "Tài Xỉu MD5"


def test_record_from_upstream():
    r = OutcomeRecord.model_validate(
        {"Phien": 12345, "Ket_qua": "Tài", "Xuc_xac_1": 6, "Xuc_xac_2": 4, "Xuc_xac_3": 1, "Tong": 11, "extra": 1}
    )
    assert r.round_id == 12345 and r.result == TAI
    assert r.dice == (6, 4, 1) and r.total == 11


def test_record_rejects_bad_die():
    with pytest.raises(ValueError):
        OutcomeRecord.model_validate(
            {"Phien": 1, "Ket_qua": "Xỉu", "Xuc_xac_1": 0, "Xuc_xac_2": 1, "Xuc_xac_3": 1, "Tong": 2}
        )
