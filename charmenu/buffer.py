# SPDX-FileCopyrightText: 2017 Scott Shawcroft, written for Adafruit Industries
# SPDX-FileCopyrightText: Copyright (c) 2024 Cooper Dalrymple
#
# SPDX-License-Identifier: MIT

import charmenu

class Screen(charmenu.Screen):
    """In-memory character grid, for running menus without a display attached."""

    def __init__(self, width:int = charmenu.DEFAULT_SCREEN_WIDTH, height:int = charmenu.DEFAULT_SCREEN_HEIGHT):
        if width < 1 or height < 1:
            raise ValueError("Invalid size ({:d}x{:d})".format(width, height))
        self.width = width
        self.height = height
        self._contents = [[" "] * width for i in range(height)]
        self._x = 0
        self._y = 0

    @property
    def cursor(self) -> tuple[int, int]:
        return self._x, self._y

    @property
    def lines(self) -> tuple[str]:
        return tuple("".join(row) for row in self._contents)

    def print(self, text:str) -> None:
        row = self._contents[self._y]
        for character in text:
            if self._x >= self.width:
                break
            row[self._x] = character
            self._x += 1

    def set_cursor(self, x:int, y:int) -> None:
        if not 0 <= x < self.width:
            raise ValueError("Invalid column ({})".format(x))
        if not 0 <= y < self.height:
            raise ValueError("Invalid row ({})".format(y))
        self._x = x
        self._y = y

    def clear(self) -> None:
        self._contents = [[" "] * self.width for i in range(self.height)]
        self._x = 0
        self._y = 0

    def __str__(self) -> str:
        return "\n".join(self.lines)
