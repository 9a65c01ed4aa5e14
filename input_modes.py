from dataclasses import dataclass


@dataclass(frozen=True)
class Normal:
    label = "TABLE"


@dataclass(frozen=True)
class ChordPending:
    prefix: str = "g"

    @property
    def label(self) -> str:
        return f"CHORD {self.prefix}"


@dataclass(frozen=True)
class PopupOpen:
    cursor: int = 0
    label = "AGG"


def mode_label(mode) -> str:
    return getattr(mode, "label", "TABLE")
