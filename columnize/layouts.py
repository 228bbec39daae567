"""
Column inference strategies.

A layout is fed every line that takes part in inference, then renders lines using
what it learned. Both strategies share that interface so the processor does not
care which one it drives.
"""

from abc import ABC, abstractmethod

from columnize.extents import Extent, fields_from_extents, merge_extents, scan_extents
from columnize.formatter import align_right, format_fields
from columnize.settings import Justification, Strategy


class ColumnLayout(ABC):
    def __init__(self, justification: Justification = Justification.AUTO):
        self.justification = justification

    @abstractmethod
    def observe(self, line: str) -> None:
        """Fold one line into the inferred columns."""

    @abstractmethod
    def fields(self, line: str) -> list[str]:
        ...

    @property
    @abstractmethod
    def widths(self) -> list[int]:
        ...

    @abstractmethod
    def is_right(self, column: int, field: str) -> bool:
        ...

    def render(self, line: str, delimiter: str) -> str:
        fields = self.fields(line)
        right = [self.is_right(i, field) for i, field in enumerate(fields)]
        return format_fields(fields, self.widths, right, delimiter)


class ExtentLayout(ColumnLayout):
    """Columns are the merged extents of all observed lines; justification is decided per cell."""

    def __init__(self, justification: Justification = Justification.AUTO):
        super().__init__(justification)
        self.extents: list[Extent] = []

    def observe(self, line: str) -> None:
        self.extents = merge_extents(self.extents, scan_extents(line))

    def fields(self, line: str) -> list[str]:
        return fields_from_extents(line, self.extents)

    @property
    def widths(self) -> list[int]:
        return [extent.width for extent in self.extents]

    def is_right(self, column: int, field: str) -> bool:
        return align_right(field, self.justification)


class WhitespaceLayout(ColumnLayout):
    """
    The nth whitespace-separated word of a line is its nth column.

    A column is right-justified in auto mode only when every word seen in it is a number.
    """

    def __init__(self, justification: Justification = Justification.AUTO):
        super().__init__(justification)
        self._widths: list[int] = []
        self._numeric: list[bool] = []

    def observe(self, line: str) -> None:
        for i, field in enumerate(line.split()):
            if i == len(self._widths):
                self._widths.append(0)
                self._numeric.append(True)
            self._widths[i] = max(self._widths[i], len(field))
            self._numeric[i] &= align_right(field, Justification.AUTO)

    def fields(self, line: str) -> list[str]:
        return line.split()

    @property
    def widths(self) -> list[int]:
        return self._widths

    def is_right(self, column: int, field: str) -> bool:
        if self.justification is Justification.AUTO:
            return self._numeric[column]
        return self.justification is Justification.RIGHT


LAYOUTS = {
    Strategy.EXTENTS: ExtentLayout,
    Strategy.WHITESPACE: WhitespaceLayout,
}


def layout_for(strategy: Strategy, justification: Justification) -> ColumnLayout:
    return LAYOUTS[strategy](justification)
