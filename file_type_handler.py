import csv
import logging
import os

import pandas as pd

from table_data import Table

log = logging.getLogger(__name__)


class LoadError(Exception):
    """Raised when a file cannot be turned into a table."""


class FileTypeHandler:
    READERS = {
        "csv": "_load_csv",
        "tsv": "_load_tsv",
        "tab": "_load_tsv",
        "parquet": "_load_parquet",
        "xlsx": "_load_excel",
        "json": "_load_json",
    }

    def __init__(self, path: str, fmt: str | None = None):
        self.path = path
        if fmt is None:
            _, ext = os.path.splitext(path)
            fmt = ext[1:] if ext.startswith(".") else ext
        self.fmt = fmt
        self.ext = fmt.lower()

        if self.ext not in self.READERS:
            raise LoadError(f"File format '{fmt}' is not supported")

    def load(self) -> Table:
        reader = getattr(self, self.READERS[self.ext])
        try:
            df = reader()
            table = Table.from_dataframe(df)
        except LoadError:
            raise
        except FileNotFoundError:
            raise LoadError(f"No such file: {self.path}") from None
        except (OSError, ValueError, pd.errors.ParserError) as exc:
            raise LoadError(f"Could not read {self.path}: {exc}") from exc
        log.info("loaded %s as %s: %d rows, %d columns", self.path, self.ext, *table.shape)
        return table

    def _read_delimited(self, sep):
        self._check_field_counts(sep)
        try:
            return pd.read_csv(
                self.path,
                sep=sep,
                dtype=str,
                keep_default_na=False,
                na_filter=False,
            )
        except pd.errors.EmptyDataError:
            return pd.DataFrame()

    def _check_field_counts(self, sep):
        # read_csv pads short rows silently; every record must match the header
        with open(self.path, newline="", encoding="utf-8") as f:
            reader = csv.reader(f, delimiter=sep)
            expected = None
            for record in reader:
                if not record:
                    continue
                if expected is None:
                    expected = len(record)
                elif len(record) != expected:
                    raise LoadError(
                        f"Malformed row at line {reader.line_num} of {self.path}: "
                        f"expected {expected} fields, saw {len(record)}"
                    )

    def _load_csv(self) -> pd.DataFrame:
        return self._read_delimited(",")

    def _load_tsv(self) -> pd.DataFrame:
        return self._read_delimited("\t")

    def _load_json(self) -> pd.DataFrame:
        return pd.read_json(self.path, dtype=False)

    def _load_parquet(self) -> pd.DataFrame:
        self._ensure_parquet_engine()
        return pd.read_parquet(self.path)

    def _load_excel(self) -> pd.DataFrame:
        self._ensure_excel_engine()
        return pd.read_excel(self.path, dtype=str, keep_default_na=False)

    def _ensure_parquet_engine(self):
        try:
            import pyarrow  # noqa: F401

            return
        except ImportError:
            pass
        raise LoadError(
            "Parquet support requires pyarrow. Install via: pip install pyarrow"
        )

    def _ensure_excel_engine(self):
        try:
            import openpyxl  # noqa: F401

            return
        except ImportError:
            pass
        raise LoadError(
            "XLSX support requires openpyxl. Install via: pip install openpyxl"
        )
