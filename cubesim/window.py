"""Size and title of the application window."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable


@dataclass
class Window:
    """Window dimensions, kept current as the framebuffer is resized.

    ``on_resize`` is called with the new size, e.g. to update a viewport.
    """

    width: int = 0
    height: int = 0
    title: str = ""
    on_resize: Callable[[int, int], Any] | None = field(default=None, repr=False)

    def initialize(self, width: int, height: int, title: str) -> None:
        self._set_size(width, height)
        self.title = title

    def resize(self, width: int, height: int) -> None:
        """Handle a framebuffer resize."""
        self._set_size(width, height)
        if self.on_resize is not None:
            self.on_resize(self.width, self.height)

    @property
    def aspect_ratio(self) -> float:
        if self.height == 0:
            raise ZeroDivisionError("window has no height")
        return self.width / self.height

    def _set_size(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("window size must not be negative")
        self.width = int(width)
        self.height = int(height)