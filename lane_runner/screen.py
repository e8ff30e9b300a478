"""
Screen
=======
Double-buffered line screen. Frames are drawn into a back buffer and
only the cells that changed since the last frame are written out.
"""

from typing import List, Optional, Tuple

from blessed import Terminal


# ANSI 256 color constants
NEON_CYAN = 51
NEON_YELLOW = 226
NEON_RED = 196

GRAY_MED = 245
GRAY_DARK = 238

DEFAULT_FG = 7

# (char, fg_color)
Cell = Tuple[str, int]
BLANK: Cell = (' ', DEFAULT_FG)
UNKNOWN: Cell = ('', DEFAULT_FG)


def _blank_rows(width: int, height: int, cell: Cell = BLANK) -> List[List[Cell]]:
    return [[cell] * width for _ in range(height)]


class Screen:
    """
    Fixed-size double buffer anchored at the top-left of the terminal.

    The first present() after construction (or after invalidate())
    clears the whole screen; later ones only touch dirty cells.
    """

    def __init__(self, term: Terminal, width: int, height: int):
        self.term = term
        self.width = width
        self.height = height
        self.front = _blank_rows(width, height, UNKNOWN)
        self.back = _blank_rows(width, height)
        self._needs_clear = True
        self._normal = term.normal

    def invalidate(self):
        """Forget what is on screen; the next present() redraws everything."""
        self._needs_clear = True

    def clear_back(self):
        self.back = _blank_rows(self.width, self.height)

    def put(self, x: int, y: int, char: str, fg_color: int = DEFAULT_FG):
        """Set one back-buffer cell. Writes outside the screen are dropped."""
        if 0 <= y < self.height and 0 <= x < self.width:
            self.back[y][x] = (char, fg_color)

    def put_string(self, x: int, y: int, text: str, fg_color: int = DEFAULT_FG):
        for offset, char in enumerate(text):
            self.put(x + offset, y, char, fg_color)

    def row_text(self, y: int) -> str:
        """Text currently held in back buffer row y."""
        return ''.join(char for char, _ in self.back[y])

    def present(self) -> str:
        """
        Emit the back buffer's changes and make it the new front.

        Runs of adjacent dirty cells share one cursor move, and the
        color sequence is only re-emitted when it changes.
        """
        parts = []
        if self._needs_clear:
            parts.append(self.term.home + self.term.clear)
            self.front = _blank_rows(self.width, self.height, UNKNOWN)
            self._needs_clear = False

        for y, (new_row, old_row) in enumerate(zip(self.back, self.front)):
            cursor_x: Optional[int] = None
            color: Optional[int] = None
            for x, (cell, shown) in enumerate(zip(new_row, old_row)):
                if cell == shown:
                    cursor_x = None
                    continue
                char, fg_color = cell
                if cursor_x != x:
                    parts.append(self.term.move_xy(x, y))
                if fg_color != color:
                    parts.append(self._normal + self.term.color(fg_color))
                    color = fg_color
                parts.append(char or ' ')
                cursor_x = x + 1

        if parts:
            parts.append(self._normal)

        self.front = self.back
        self.back = _blank_rows(self.width, self.height)
        return ''.join(parts)
