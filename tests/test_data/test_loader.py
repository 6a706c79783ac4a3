"""Tests for CSV ingestion of OHLC data."""

from decimal import Decimal

import pytest

from chartsignal.data.loader import REQUIRED_COLUMNS, generate_sample_csv, load_csv, parse_csv
from chartsignal.exceptions import (
    EmptyInputError,
    IngestionError,
    MissingColumnsError,
    NoValidRowsError,
)

HEADER = "time,open,high,low,close,volume"


class TestParseCsv:
    """Tests for parse_csv."""

    def test_parses_rows_in_order(self) -> None:
        text = "\n".join([
            HEADER,
            "2024-01-01,100.00,105.00,99.00,103.00,1000000",
            "2024-01-02,103.00,107.00,102.00,106.50,1200000",
        ])
        records = parse_csv(text)

        assert len(records) == 2
        assert records[0].time == "2024-01-01"
        assert records[0].open == Decimal("100.00")
        assert records[1].close == Decimal("106.50")
        assert records[1].volume == Decimal("1200000")

    def test_header_is_case_insensitive_reordered_and_extra_columns_ignored(self) -> None:
        text = "\n".join([
            " Close , VOLUME,Time,open,High,low,ticker",
            "10,500,day-1,9,11,8,ABC",
        ])
        records = parse_csv(text)

        assert records[0].time == "day-1"
        assert records[0].close == Decimal("10")
        assert records[0].high == Decimal("11")
        assert records[0].volume == Decimal("500")

    def test_time_label_kept_verbatim(self) -> None:
        records = parse_csv(f"{HEADER}\nbar #7,1,2,0.5,1.5,10")
        assert records[0].time == "bar #7"

    @pytest.mark.parametrize("text", ["", "   \n  ", HEADER, f"{HEADER}\n\n"])
    def test_empty_input(self, text: str) -> None:
        with pytest.raises(EmptyInputError):
            parse_csv(text)

    def test_missing_columns_listed_in_order(self) -> None:
        with pytest.raises(MissingColumnsError) as exc_info:
            parse_csv("time,open,high,low\n2024-01-01,1,2,0.5")

        assert exc_info.value.missing == ["close", "volume"]
        assert "close, volume" in str(exc_info.value)

    def test_malformed_rows_are_skipped(self) -> None:
        text = "\n".join([
            HEADER,
            "2024-01-01,100,105,99,103,1000",
            "2024-01-02,abc,105,99,103,1000",
            "",
            "2024-01-03,100,105,99,NaN,1000",
            "2024-01-04,100,105,99,inf,1000",
            "2024-01-05,100,105",
            "2024-01-06,101,106,100,104,1100",
        ])
        records = parse_csv(text)

        assert [r.time for r in records] == ["2024-01-01", "2024-01-06"]

    def test_no_valid_rows(self) -> None:
        text = "\n".join([HEADER, "a,b,c,d,e,f", "2024-01-01,,,,,"])
        with pytest.raises(NoValidRowsError) as exc_info:
            parse_csv(text)

        assert exc_info.value.skipped == 2

    def test_error_kinds_are_distinct(self) -> None:
        kinds = {EmptyInputError.kind, MissingColumnsError.kind, NoValidRowsError.kind}
        assert len(kinds) == 3
        assert issubclass(MissingColumnsError, IngestionError)


class TestSampleCsv:
    """Tests for the downloadable sample file."""

    def test_sample_parses_to_twenty_records(self) -> None:
        records = parse_csv(generate_sample_csv())

        assert len(records) == 20
        assert records[0].time == "2024-01-01"
        assert records[-1].close == Decimal("119.00")

    def test_sample_header(self) -> None:
        header = generate_sample_csv().splitlines()[0]
        assert header.split(",") == list(REQUIRED_COLUMNS)


class TestLoadCsv:
    """Tests for reading CSV files from disk."""

    def test_load_from_path(self, tmp_path) -> None:
        path = tmp_path / "prices.csv"
        path.write_text(generate_sample_csv(), encoding="utf-8")

        assert len(load_csv(path)) == 20

    def test_missing_file_raises_os_error(self, tmp_path) -> None:
        with pytest.raises(OSError):
            load_csv(tmp_path / "missing.csv")
