"""Cursor and scroll position of a windowed, scrollable list."""

from __future__ import annotations

MAX_TITLE_SHOW = 14
MAX_WINDOW_SCROLL = 6


class ListCursor:
    """Tracks the highlighted row of a list shown a window at a time.

    cursor is the row inside the window and scroll the first list entry
    shown; long lists keep the cursor near the middle of the window.
    """

    def __init__(
        self,
        entries: int,
        cursor: int = 0,
        scroll: int = 0,
        max_show: int = MAX_TITLE_SHOW,
        max_window_scroll: int = MAX_WINDOW_SCROLL,
    ) -> None:
        self.entries = entries
        self.cursor = cursor
        self.scroll = scroll
        self.max_show = max_show
        self.max_window_scroll = max_window_scroll

    def index(self) -> int:
        """Position in the list of the highlighted entry."""
        return self.cursor + self.scroll

    def reset(self) -> None:
        self.cursor = 0
        self.scroll = 0

    def shift_for_new_entry(self, ascending: bool) -> None:
        """Keep the same entry highlighted after one is added at the top."""
        if self.cursor != 0 and not ascending:
            self.cursor += 1

    def move_down(self, amount: int = 1, wrap: bool = True) -> None:
        if self.entries <= 0:
            return
        for _ in range(amount):
            if self.entries <= self.max_show:
                if wrap:
                    self.cursor = (self.cursor + 1) % self.entries
                else:
                    self.cursor = min(self.cursor + 1, self.entries - 1)
            elif self.cursor < self.max_window_scroll:
                self.cursor += 1
            elif (self.cursor + self.scroll + 1) % self.entries != 0:
                self.scroll += 1
            elif wrap:
                self.cursor = self.scroll = 0

    def move_up(self, amount: int = 1, wrap: bool = True) -> None:
        if self.entries <= 0:
            return
        for _ in range(amount):
            if self.scroll > 0:
                if self.cursor > self.max_window_scroll:
                    self.cursor -= 1
                else:
                    self.scroll -= 1
            elif self.cursor > 0:
                self.cursor -= 1
            else:
                if not wrap:
                    return
                if self.entries > self.max_show:
                    self.cursor = self.max_window_scroll
                    self.scroll = self.entries - self.max_window_scroll - 1
                else:
                    self.cursor = self.entries - 1