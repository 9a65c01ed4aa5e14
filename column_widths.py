from dataclasses import dataclass


DEFAULT_FIXED_WIDTH = 15
EMPTY_CONTENT_WIDTH = 10
CONTENT_PADDING = 2


@dataclass(frozen=True)
class Fixed:
    width: int = DEFAULT_FIXED_WIDTH


@dataclass(frozen=True)
class ContentFit:
    pass


def column_width(table, col_idx: int, policy) -> int:
    if isinstance(policy, Fixed):
        return max(1, policy.width)
    lengths = [len(cell) for cell in table.column(col_idx)]
    longest = max(lengths) if lengths else EMPTY_CONTENT_WIDTH
    return longest + CONTENT_PADDING


def toggle_policy(policy, fixed_width: int = DEFAULT_FIXED_WIDTH):
    # Going back to Fixed always uses the default width, never a prior one.
    if isinstance(policy, Fixed):
        return ContentFit()
    return Fixed(fixed_width)


def default_policies(column_count: int, fixed_width: int = DEFAULT_FIXED_WIDTH):
    return [Fixed(fixed_width) for _ in range(column_count)]
