from datetime import datetime, timedelta, timezone

from liftlog.utils import dates
from tests.test_data import TEST_DATETIME, TEST_DISPLAY_TIMESTAMP, TEST_ISO_TIMESTAMP


def test_now_is_aware_utc():
    assert dates.now().tzinfo == timezone.utc


def test_to_utc_assumes_naive_is_utc():
    naive = datetime(2025, 12, 15, 10, 30)

    assert dates.to_utc(naive) == TEST_DATETIME


def test_dt_to_iso_uses_z_suffix():
    assert dates.dt_to_iso(TEST_DATETIME) == "2025-12-15T10:30:00Z"


def test_dt_to_iso_converts_offset():
    dt = datetime(2025, 12, 15, 5, 30, tzinfo=timezone(timedelta(hours=-5)))

    assert dates.dt_to_iso(dt) == "2025-12-15T10:30:00Z"


def test_iso_to_dt():
    assert dates.iso_to_dt(TEST_ISO_TIMESTAMP) == TEST_DATETIME


# --------------- parse_timestamp ---------------


def test_parse_timestamp_iso():
    assert dates.parse_timestamp(TEST_ISO_TIMESTAMP) == TEST_DATETIME


def test_parse_timestamp_display_format():
    assert dates.parse_timestamp(TEST_DISPLAY_TIMESTAMP) == TEST_DATETIME


def test_parse_timestamp_rejects_garbage():
    assert dates.parse_timestamp("yesterday-ish") is None
    assert dates.parse_timestamp("") is None
    assert dates.parse_timestamp(None) is None  # type: ignore[arg-type]


def test_epoch_millis():
    epoch = datetime(1970, 1, 1, 0, 0, 1, tzinfo=timezone.utc)

    assert dates.epoch_millis(epoch) == 1000
