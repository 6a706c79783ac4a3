"""Custom exceptions for chartsignal.

The indicator and signal core never raises on well-formed input. Everything
here belongs to the layers around it (CSV ingestion, persistence).
"""


class ChartSignalError(Exception):
    """Base exception for all chartsignal errors."""

    kind = "error"


class IngestionError(ChartSignalError):
    """Raised when uploaded price data cannot be turned into OHLC records."""

    kind = "ingestion_error"


class EmptyInputError(IngestionError):
    """Raised when the CSV has no header or no data rows."""

    kind = "empty_input"

    def __init__(self, message: str = "CSV file is empty or has no data rows") -> None:
        super().__init__(message)


class MissingColumnsError(IngestionError):
    """Raised when required columns are absent from the CSV header."""

    kind = "missing_columns"

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        super().__init__(f"Missing columns: {', '.join(missing)}")


class NoValidRowsError(IngestionError):
    """Raised when every data row was rejected as malformed."""

    kind = "no_valid_rows"

    def __init__(self, skipped: int = 0) -> None:
        self.skipped = skipped
        super().__init__(f"No valid rows found in file ({skipped} rows skipped)")
