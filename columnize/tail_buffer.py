from typing import Optional

from columnize.errors import ConfigurationError, PhaseError


class TailBuffer:
    """
    Fixed-capacity ring of lines that hands back the line pushed `capacity` pushes ago.

    Holding the most recent lines back keeps the last `capacity` lines out of column
    inference while still letting them be printed, unchanged and in order, at the end.
    """

    def __init__(self, capacity: int):
        if capacity < 0:
            raise ConfigurationError(f"cannot create tail buffer with negative capacity: {capacity}")
        self.capacity = capacity
        self._slots: list[str] = [""] * capacity
        self._index = 0
        self._filled = 0  # slots holding a pushed line, up to capacity
        self._drained = False

    @property
    def wrapped(self) -> bool:
        return self.capacity > 0 and self._filled == self.capacity

    def push(self, line: str) -> Optional[str]:
        """Store line and return the one it displaces, or None while the buffer is filling."""
        if self._drained:
            raise PhaseError("tail buffer already drained")
        if not self.capacity:
            return line

        previous = self._slots[self._index] if self.wrapped else None
        self._slots[self._index] = line
        self._filled = min(self._filled + 1, self.capacity)
        self._index = (self._index + 1) % self.capacity
        return previous

    def drain(self) -> list[str]:
        """Return the held lines oldest first. The buffer accepts nothing afterwards."""
        if self._drained:
            raise PhaseError("tail buffer already drained")
        self._drained = True
        if self.wrapped:
            return self._slots[self._index:] + self._slots[:self._index]
        return self._slots[:self._index]

    def __len__(self) -> int:
        return self._filled
