"""Tests for owl.profiling — scan profiling API."""

from owl import scan, tokenize
from owl.profiling import ScanAccumulator, get_scan_accumulator, profiled_scan


class TestGetScanAccumulator:
    def test_returns_none_when_disabled(self) -> None:
        assert get_scan_accumulator() is None

    def test_returns_none_outside_context(self) -> None:
        with profiled_scan():
            pass
        assert get_scan_accumulator() is None


class TestProfiledScan:
    def test_yields_accumulator(self) -> None:
        with profiled_scan() as acc:
            assert isinstance(acc, ScanAccumulator)
            assert get_scan_accumulator() is acc

    def test_records_scan(self) -> None:
        with profiled_scan() as acc:
            tokenize("a = b")
        assert acc.scan_calls == 1
        assert acc.source_length == len("a = b")
        assert acc.token_count == 4
        assert acc.error_count == 0

    def test_records_failed_scan(self) -> None:
        with profiled_scan() as acc:
            scan("a ?")
        assert acc.scan_calls == 1
        assert acc.error_count == 1
        assert acc.token_count == 1

    def test_summary_keys(self) -> None:
        with profiled_scan() as acc:
            tokenize("a")
            tokenize("b")
        summary = acc.summary()
        assert summary["scan_calls"] == 2
        assert set(summary) == {
            "total_ms",
            "scan_ms",
            "source_length",
            "token_count",
            "scan_calls",
            "error_count",
        }
