import pandas as pd


def _cell_text(value) -> str:
    # nested JSON values arrive as lists or dicts; pd.isna on them is not a bool
    if not pd.api.types.is_scalar(value):
        return str(value)
    if value is None or pd.isna(value):
        return ""
    return str(value)


class Table:
    """Rectangular table of string cells, addressed by position.

    Headers may repeat, so columns are always looked up with ``iloc``.
    """

    def __init__(self, headers, columns):
        headers = [str(h) for h in headers]
        columns = [[str(v) for v in col] for col in columns]
        if len(headers) != len(columns):
            raise ValueError(
                f"{len(headers)} headers given for {len(columns)} columns"
            )
        lengths = {len(col) for col in columns}
        if len(lengths) > 1:
            raise ValueError("All columns must have the same number of rows")

        df = pd.DataFrame(
            {i: pd.Series(col, dtype=object) for i, col in enumerate(columns)}
        )
        df.columns = pd.Index(headers, dtype=object)
        self.df = df

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame) -> "Table":
        headers = [str(c) for c in df.columns]
        columns = []
        for i in range(df.shape[1]):
            series = df.iloc[:, i]
            columns.append(
                [_cell_text(v) for v in series]
            )
        return cls(headers, columns)

    @property
    def headers(self) -> list[str]:
        return list(self.df.columns)

    @property
    def row_count(self) -> int:
        return len(self.df)

    @property
    def column_count(self) -> int:
        return self.df.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return self.row_count, self.column_count

    def column(self, col_idx: int) -> list[str]:
        return list(self.df.iloc[:, col_idx])

    def cell(self, row_idx: int, col_idx: int) -> str:
        return self.df.iloc[row_idx, col_idx]

    def row(self, row_idx: int) -> list[str]:
        return list(self.df.iloc[row_idx])

    def reorder_rows(self, order):
        """Permute every column by ``order`` (a list of current row indices)."""
        if sorted(order) != list(range(self.row_count)):
            raise ValueError("Row order must be a permutation of the rows")
        self.df = self.df.iloc[list(order)].reset_index(drop=True)

    def __repr__(self):
        return f"Table(shape={self.shape}, headers={self.headers!r})"
