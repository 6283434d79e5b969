# SPDX-FileCopyrightText: 2017 Scott Shawcroft, written for Adafruit Industries
# SPDX-FileCopyrightText: Copyright (c) 2024 Cooper Dalrymple
#
# SPDX-License-Identifier: MIT

import charmenu

try:
    from typing import TYPE_CHECKING
except ImportError:
    TYPE_CHECKING = False

if TYPE_CHECKING:
    from adafruit_character_lcd.character_lcd import Character_LCD

class Screen(charmenu.Screen):
    """:class:`charmenu.Screen` backed by an Adafruit character LCD.

    :param lcd: Any ``Character_LCD`` from Adafruit_CircuitPython_CharLCD.
    :param columns: Characters per line.
    :param lines: Number of lines.
    """

    def __init__(self, lcd:"Character_LCD", columns:int = charmenu.DEFAULT_SCREEN_WIDTH, lines:int = charmenu.DEFAULT_SCREEN_HEIGHT):
        if columns < 1:
            raise ValueError("At least 1 column is required")
        if lines < 1:
            raise ValueError("At least 1 line is required")
        self._lcd = lcd
        self.width = columns
        self.height = lines
        self._lcd.blink = False
        self._lcd.cursor = False

    @property
    def lcd(self) -> "Character_LCD":
        return self._lcd

    def print(self, text:str) -> None:
        # The message setter starts writing at the last cursor_position().
        self._lcd.message = text

    def set_cursor(self, x:int, y:int) -> None:
        self._lcd.cursor_position(x, y)

    def clear(self) -> None:
        self._lcd.clear()
