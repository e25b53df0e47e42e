"""Metrics arithmetic tests: uptime, MiB rounding, memory bar clamp, ISO instants."""

from datetime import datetime, timedelta, timezone

from standin.core.metrics import (
    bytes_to_mb, format_percent, format_uptime, memory_percent, to_iso_instant,
)

MB = 1024 * 1024


def test_format_uptime_truncates_components():
    assert format_uptime(3725) == "1h 2m 5s"
    assert format_uptime(3725.99) == "1h 2m 5s"
    assert format_uptime(0) == "0h 0m 0s"
    assert format_uptime(59.9) == "0h 0m 59s"
    assert format_uptime(90061) == "25h 1m 1s"


def test_bytes_to_mb_rounds_to_nearest():
    assert bytes_to_mb(157286400) == 150
    assert bytes_to_mb(150 * MB + MB // 2) == 151
    assert bytes_to_mb(150 * MB + MB // 2 - 1) == 150
    assert bytes_to_mb(0) == 0


def test_memory_percent_is_exact_below_ceiling():
    assert memory_percent(150) == 29.296875
    assert memory_percent(0) == 0


def test_memory_percent_clamped_at_ceiling():
    assert memory_percent(512) == 100
    assert memory_percent(2048) == 100


def test_format_percent():
    assert format_percent(29.296875) == "29.296875"
    assert format_percent(100) == "100"
    assert format_percent(15) == "15"
    assert format_percent(50.0) == "50"


def test_iso_instant_uses_milliseconds_and_z_suffix():
    moment = datetime(2024, 5, 1, 12, 0, 0, 123456, tzinfo=timezone.utc)
    assert to_iso_instant(moment) == "2024-05-01T12:00:00.123Z"


def test_iso_instant_converts_offsets_to_utc():
    plus_two = timezone(timedelta(hours=2))
    moment = datetime(2024, 5, 1, 14, 0, 0, tzinfo=plus_two)
    assert to_iso_instant(moment) == "2024-05-01T12:00:00.000Z"


def test_iso_instant_treats_naive_as_utc():
    assert to_iso_instant(datetime(2024, 1, 1)) == "2024-01-01T00:00:00.000Z"
