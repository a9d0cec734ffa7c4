from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from rich.console import Console
from rich.control import Control
from rich.segment import ControlType
from rich.text import Text


class SurfaceUnavailableError(RuntimeError):
    """Raised when no color-capable, cursor-addressable terminal is available."""


class OutputSurface(ABC):
    """
    Line-oriented, color-capable, cursor-addressable text display.

    Redraws are cursor-relative: nothing else may write to the surface
    between two renderer calls.
    """

    @abstractmethod
    def write_line(self, text: str, color: str | None = None) -> None: ...

    @abstractmethod
    def carriage_return(self) -> None: ...

    @abstractmethod
    def cursor_up(self) -> None: ...

    @abstractmethod
    def clear_line(self) -> None: ...


class RichSurface(OutputSurface):
    def __init__(self, console: Console) -> None:
        self.console = console

    def write_line(self, text: str, color: str | None = None) -> None:
        self.console.print(Text(text, style=color or ""), soft_wrap=True)

    def carriage_return(self) -> None:
        self.console.control(Control(ControlType.CARRIAGE_RETURN))

    def cursor_up(self) -> None:
        self.console.control(Control((ControlType.CURSOR_UP, 1)))

    def clear_line(self) -> None:
        # 2 = erase the whole line, leaving the cursor column unchanged
        self.console.control(Control((ControlType.ERASE_IN_LINE, 2)))


def open_terminal_surface(console: Console | None = None) -> RichSurface:
    """
    Wrap a rich Console, refusing consoles that cannot draw the race.

    Raises SurfaceUnavailableError for pipes, dumb terminals and terminals
    without any color support.
    """
    console = console if console is not None else Console()
    if not console.is_terminal or console.is_dumb_terminal or console.color_system is None:
        raise SurfaceUnavailableError("console not supported")
    return RichSurface(console)


@dataclass
class InMemorySurface(OutputSurface):
    """
    Simple screen model for tests/demos.

    Keeps one (text, color) entry per screen row plus the cursor row, so
    redraws overwrite earlier output the way a terminal would.
    """

    rows: list[tuple[str, str | None]] = field(default_factory=list)
    cursor_row: int = 0
    writes: int = field(default=0, init=False)

    def write_line(self, text: str, color: str | None = None) -> None:
        entry = (text, color)
        if self.cursor_row < len(self.rows):
            self.rows[self.cursor_row] = entry
        else:
            self.rows.extend([("", None)] * (self.cursor_row - len(self.rows)))
            self.rows.append(entry)
        self.cursor_row += 1
        self.writes += 1

    def carriage_return(self) -> None:
        # Only whole lines are modelled; the column is always 0 between writes.
        pass

    def cursor_up(self) -> None:
        if self.cursor_row > 0:
            self.cursor_row -= 1

    def clear_line(self) -> None:
        if self.cursor_row < len(self.rows):
            self.rows[self.cursor_row] = ("", None)

    @property
    def lines(self) -> list[str]:
        """Visible text of every row, trailing blank rows dropped."""
        texts = [text for text, _ in self.rows]
        while texts and not texts[-1]:
            texts.pop()
        return texts
