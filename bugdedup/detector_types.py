"""The kinds of duplicate detectors that can be requested."""

from __future__ import annotations

from enum import IntEnum


class DetectorType(IntEnum):
    """A detector kind; ``NONE`` marks the absence of a valid choice."""

    NONE = 0
    SVM = 1
    PLAIN = 2
    RANK_NET = 3

    @classmethod
    def parse(cls, value: int) -> "DetectorType":
        """Return the detector type with the numeric ``value``."""
        try:
            kind = cls(value)
        except ValueError:
            kind = cls.NONE
        if kind is cls.NONE:
            raise ValueError(f"unhandled detector type {value}")
        return kind

    def label(self) -> str:
        """Return the printable name of this detector type."""
        if self is DetectorType.NONE:
            raise ValueError(f"unhandled detector type {int(self)}")
        return self.name


def detector_type_mapping() -> str:
    """Describe the numeric values accepted for detector types."""
    return "".join(
        f"{int(kind)}:{kind.name}, " for kind in DetectorType if kind is not DetectorType.NONE
    )