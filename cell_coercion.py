import numpy as np


def parse_float(text):
    """Parse a cell as a float, or return None when it is not numeric.

    Surrounding whitespace, digit separators ("1_000") and non-ASCII
    digits are rejected, so " 7", "1_000" or Arabic-Indic numerals count as text.
    """
    if text is None:
        return None
    text = str(text)
    if not text or not text.isascii():
        return None
    if text != text.strip() or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def compare_cells(a: str, b: str) -> int:
    a_num = parse_float(a)
    b_num = parse_float(b)
    if a_num is not None and b_num is not None:
        # NaN compares neither lower nor higher: treat as equal
        if a_num < b_num:
            return -1
        if a_num > b_num:
            return 1
        return 0
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def format_number(value: float) -> str:
    if np.isnan(value):
        return "NaN"
    return np.format_float_positional(value, trim="-")
