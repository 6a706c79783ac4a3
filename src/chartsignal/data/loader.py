"""CSV ingestion of OHLC price data.

Turns raw CSV text into validated OHLCRecord objects. This is the only place
input is validated; the indicator and signal code trusts what it receives.
"""

import csv
import io
from decimal import Decimal, InvalidOperation
from pathlib import Path

from chartsignal.data.models import OHLCRecord
from chartsignal.exceptions import EmptyInputError, MissingColumnsError, NoValidRowsError
from chartsignal.logging import get_logger

logger = get_logger(__name__)

REQUIRED_COLUMNS = ("time", "open", "high", "low", "close", "volume")
_NUMERIC_COLUMNS = REQUIRED_COLUMNS[1:]


def _parse_number(raw: str) -> Decimal | None:
    """Parse a finite Decimal, returning None for anything else (NaN, inf, junk)."""
    try:
        value = Decimal(raw.strip())
    except InvalidOperation:
        return None
    if not value.is_finite():
        return None
    return value


def parse_csv(text: str) -> list[OHLCRecord]:
    """Parse CSV text with a time,open,high,low,close,volume header.

    Header names are matched case-insensitively after trimming whitespace and
    may appear in any order; extra columns are ignored. Blank lines are
    skipped. Rows with a missing or non-numeric value are skipped with a
    warning.

    Args:
        text: Full CSV file content.

    Returns:
        OHLC records in file order.

    Raises:
        EmptyInputError: No header or no data rows.
        MissingColumnsError: A required column is absent from the header.
        NoValidRowsError: Every data row was rejected.
    """
    lines = text.strip().splitlines()
    if len(lines) < 2:
        raise EmptyInputError()

    reader = csv.reader(io.StringIO("\n".join(lines)))
    header = [name.strip().lower() for name in next(reader)]

    missing = [col for col in REQUIRED_COLUMNS if col not in header]
    if missing:
        raise MissingColumnsError(missing)

    indices = {col: header.index(col) for col in REQUIRED_COLUMNS}

    records: list[OHLCRecord] = []
    skipped = 0
    for row in reader:
        line_no = reader.line_num
        if not any(cell.strip() for cell in row):
            continue

        if len(row) <= max(indices.values()):
            skipped += 1
            logger.warning("csv_row_skipped", line=line_no, reason="missing fields")
            continue

        numbers = {col: _parse_number(row[indices[col]]) for col in _NUMERIC_COLUMNS}
        invalid = [col for col, value in numbers.items() if value is None]
        if invalid:
            skipped += 1
            logger.warning(
                "csv_row_skipped", line=line_no, reason="invalid values", columns=invalid
            )
            continue

        records.append(
            OHLCRecord(
                time=row[indices["time"]].strip(),
                open=numbers["open"],  # type: ignore[arg-type]
                high=numbers["high"],  # type: ignore[arg-type]
                low=numbers["low"],  # type: ignore[arg-type]
                close=numbers["close"],  # type: ignore[arg-type]
                volume=numbers["volume"],  # type: ignore[arg-type]
            )
        )

    if not records:
        raise NoValidRowsError(skipped)

    logger.info("csv_parsed", rows=len(records), skipped=skipped)
    return records


def load_csv(path: str | Path) -> list[OHLCRecord]:
    """Read a UTF-8 CSV file and parse it with :func:`parse_csv`."""
    return parse_csv(Path(path).read_text(encoding="utf-8"))


_SAMPLE_ROWS = [
    ("2024-01-01", "100.00", "105.00", "99.00", "103.00", "1000000"),
    ("2024-01-02", "103.00", "107.00", "102.00", "106.00", "1200000"),
    ("2024-01-03", "106.00", "108.00", "104.00", "105.00", "1100000"),
    ("2024-01-04", "105.00", "110.00", "105.00", "109.00", "1300000"),
    ("2024-01-05", "109.00", "112.00", "108.00", "111.00", "1400000"),
    ("2024-01-08", "111.00", "113.00", "109.00", "110.00", "1250000"),
    ("2024-01-09", "110.00", "111.00", "107.00", "108.00", "1150000"),
    ("2024-01-10", "108.00", "109.00", "105.00", "106.00", "1050000"),
    ("2024-01-11", "106.00", "108.00", "104.00", "107.00", "1100000"),
    ("2024-01-12", "107.00", "110.00", "106.00", "109.00", "1200000"),
    ("2024-01-15", "109.00", "111.00", "108.00", "110.00", "1150000"),
    ("2024-01-16", "110.00", "112.00", "109.00", "111.00", "1200000"),
    ("2024-01-17", "111.00", "113.00", "110.00", "112.00", "1250000"),
    ("2024-01-18", "112.00", "114.00", "111.00", "113.00", "1300000"),
    ("2024-01-19", "113.00", "115.00", "112.00", "114.00", "1350000"),
    ("2024-01-22", "114.00", "116.00", "113.00", "115.00", "1400000"),
    ("2024-01-23", "115.00", "117.00", "114.00", "116.00", "1450000"),
    ("2024-01-24", "116.00", "118.00", "115.00", "117.00", "1500000"),
    ("2024-01-25", "117.00", "119.00", "116.00", "118.00", "1550000"),
    ("2024-01-26", "118.00", "120.00", "117.00", "119.00", "1600000"),
]


def generate_sample_csv() -> str:
    """Return a small example file users can download as a template."""
    lines = [",".join(REQUIRED_COLUMNS)]
    lines.extend(",".join(row) for row in _SAMPLE_ROWS)
    return "\n".join(lines)
