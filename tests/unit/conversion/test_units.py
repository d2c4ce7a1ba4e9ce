"""Unit tests for unit conversion helpers."""

from __future__ import annotations

import pytest

from es_exporter.conversion import (
    bool_to_gauge,
    cluster_status_value,
    millis_to_seconds,
    nanos_to_seconds,
    nanos_to_whole_seconds,
    passthrough,
)


class TestDurations:
    @pytest.mark.parametrize(
        ("millis", "seconds"),
        [(0, 0.0), (1, 0.001), (1500, 1.5), (86_400_000, 86_400.0)],
    )
    def test_millis_to_seconds(self, millis: int, seconds: float) -> None:
        assert millis_to_seconds(millis) == pytest.approx(seconds)

    def test_millis_keeps_fractions(self) -> None:
        assert millis_to_seconds(999) == pytest.approx(0.999)

    def test_nanos_to_seconds(self) -> None:
        assert nanos_to_seconds(2_500_000_000) == pytest.approx(2.5)

    def test_none_passes_through(self) -> None:
        assert millis_to_seconds(None) is None
        assert nanos_to_seconds(None) is None


class TestWholeSeconds:
    @pytest.mark.parametrize(
        ("nanos", "seconds"),
        [
            (None, 0),
            (0, 0),
            (999_999_999, 0),
            (1_000_000_000, 1),
            (5_000_000_000, 5),
            (5_999_999_999, 5),
        ],
    )
    def test_truncates(self, nanos: int | None, seconds: int) -> None:
        assert nanos_to_whole_seconds(nanos) == seconds

    @pytest.mark.parametrize(
        ("nanos", "seconds"),
        [(-1, 0), (-999_999_999, 0), (-1_500_000_000, -1), (-2_000_000_000, -2)],
    )
    def test_negative_truncates_toward_zero(self, nanos: int, seconds: int) -> None:
        assert nanos_to_whole_seconds(nanos) == seconds

    def test_returns_int(self) -> None:
        assert isinstance(nanos_to_whole_seconds(3_000_000_000), int)


class TestFlags:
    @pytest.mark.parametrize("flag", [True, 1, "true", "TRUE", " yes ", "1"])
    def test_truthy(self, flag: object) -> None:
        assert bool_to_gauge(flag) == 1

    @pytest.mark.parametrize("flag", [False, 0, "false", "no", "0"])
    def test_falsy(self, flag: object) -> None:
        assert bool_to_gauge(flag) == 0

    def test_none(self) -> None:
        assert bool_to_gauge(None) is None

    def test_unknown_string(self) -> None:
        with pytest.raises(ValueError):
            bool_to_gauge("maybe")


class TestClusterStatus:
    @pytest.mark.parametrize(
        ("status", "value"),
        [("green", 0), ("yellow", 1), ("red", 2), ("RED", 2)],
    )
    def test_known(self, status: str, value: int) -> None:
        assert cluster_status_value(status) == value

    def test_none(self) -> None:
        assert cluster_status_value(None) is None

    def test_unknown(self) -> None:
        with pytest.raises(ValueError):
            cluster_status_value("purple")


def test_passthrough_returns_input_unchanged() -> None:
    assert passthrough(1234) == 1234
    assert passthrough(None) is None
