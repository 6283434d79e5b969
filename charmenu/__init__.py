# SPDX-FileCopyrightText: 2017 Scott Shawcroft, written for Adafruit Industries
# SPDX-FileCopyrightText: Copyright (c) 2024 Cooper Dalrymple
#
# SPDX-License-Identifier: MIT
"""
`charmenu`
================================================================================

Hierarchical list menus for small character displays


Implementation Notes
--------------------

**Hardware:**

* If using :class:`charmenu.character_lcd.Screen`, any standard 16x2 or 16x4 character LCD that
  is supported by Adafruit_CircuitPython_CharLCD can be used.

* Any other display works by implementing :class:`charmenu.Screen`. :class:`charmenu.buffer.Screen`
  keeps the characters in memory for simulation.

**Software and Dependencies:**

* An :mod:`asyncio` event loop. :meth:`List.show` returns a future that resolves on the next
  :meth:`List.select`, and long labels are rolled by a background task.

"""

__version__ = "0.0.0+auto.0"

import asyncio
import logging
from enum import Enum

try:
    from typing import Any, Mapping, Sequence
except ImportError:
    pass

logger = logging.getLogger(__name__)

DEFAULT_SCREEN_WIDTH = 16
DEFAULT_SCREEN_HEIGHT = 2

SELECTED_LIST_ITEM_PREFIX = "> "
LIST_ITEM_PREFIX = "  "

ROLLING_INTERVAL = 0.3
ROLLING_PADDING = " "

UP_TEXT = ".."

def truncate(text:str, max_length:int, ellipsis:str = "...") -> str:
    """Fit ``text`` into ``max_length`` characters, ending with ``ellipsis`` when cut."""
    text = text.strip()
    if len(text) <= max_length:
        return text
    if max_length < len(ellipsis):
        return ellipsis[:max(max_length, 0)]
    return text[:max_length - len(ellipsis)].rstrip() + ellipsis

class Screen:
    """Character display a :class:`List` draws onto.

    ``width`` and ``height`` may be left as ``None``, in which case lists fall back to
    :data:`DEFAULT_SCREEN_WIDTH` and :data:`DEFAULT_SCREEN_HEIGHT`.
    """

    width:int = None
    height:int = None

    def print(self, text:str) -> None:
        """Write ``text`` at the cursor without wrapping or clearing."""
        raise NotImplementedError()

    def set_cursor(self, x:int, y:int) -> None:
        raise NotImplementedError()

    def clear(self) -> None:
        raise NotImplementedError()

class ItemKind(Enum):
    VALUE = "value"
    LIST = "list"
    UP = "up"

class MenuValue:
    """Value of a menu list item: a payload, a nested :class:`List` or the up marker."""

    def __init__(self, kind:ItemKind, payload:Any = None):
        self._kind = kind
        self._payload = payload

    @classmethod
    def of(cls, payload:Any) -> "MenuValue":
        return cls(ItemKind.VALUE, payload)

    @classmethod
    def nested(cls, items:"List") -> "MenuValue":
        return cls(ItemKind.LIST, items)

    @property
    def kind(self) -> ItemKind:
        return self._kind

    @property
    def payload(self) -> Any:
        return self._payload

    def __eq__(self, other:object) -> bool:
        if not isinstance(other, MenuValue):
            return NotImplemented
        if self._kind is not other._kind:
            return False
        if self._kind is ItemKind.LIST:
            return self._payload is other._payload
        return self._payload == other._payload

    def __hash__(self) -> int:
        return hash(self._kind)

    def __repr__(self) -> str:
        if self._kind is ItemKind.UP:
            return "UP"
        return "MenuValue({:s}, {!r})".format(self._kind.name, self._payload)

UP = MenuValue(ItemKind.UP)

class ListItem:

    __slots__ = ("_text", "_value")

    def __init__(self, text:str, value:Any):
        self._text = text
        self._value = value

    @property
    def text(self) -> str:
        return self._text

    @property
    def value(self) -> Any:
        return self._value

    def __eq__(self, other:object) -> bool:
        if not isinstance(other, ListItem):
            return NotImplemented
        return self._text == other._text and self._value == other._value

    def __hash__(self) -> int:
        return hash(self._text)

    def __repr__(self) -> str:
        return "ListItem({!r}, {!r})".format(self._text, self._value)

class _Rolling:
    """Sliding window over ``label + padding + label`` for the selected row."""

    def __init__(self, label:str, padding:str, available:int, row:int):
        self.text = label + padding + label
        self.available = available
        self.row = row
        self.offset = 0
        self.min_offset = -(len(label) + len(padding))

    def tick(self) -> str|None:
        # Offset starts at 0 so the first tick holds the label still.
        window = None
        if self.offset:
            window = self.text[-self.offset:-self.offset + self.available]
            if self.offset == self.min_offset:
                self.offset = 0
        self.offset -= 1
        return window

class List:
    """Scrollable, selectable list of :class:`ListItem` bound to a fixed-size screen.

    :param screen: Display to draw onto.
    :param items: Items in display order.
    """

    selected_prefix:str = SELECTED_LIST_ITEM_PREFIX
    prefix:str = LIST_ITEM_PREFIX

    rolling_interval:float = ROLLING_INTERVAL
    rolling_padding:str = ROLLING_PADDING

    def __init__(self, screen:Screen, items:Sequence[ListItem]):
        self.screen = screen
        self._items = tuple(items)
        self._width = getattr(screen, "width", None) or DEFAULT_SCREEN_WIDTH
        self._height = getattr(screen, "height", None) or DEFAULT_SCREEN_HEIGHT
        self._top = 0
        self._index = 0
        self._future = None
        self._rolling = None
        self._rolling_task = None

    @property
    def items(self) -> tuple[ListItem]:
        return self._items

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def top(self) -> int:
        return self._top

    @property
    def index(self) -> int:
        return self._index

    @property
    def selected(self) -> ListItem|None:
        return self._items[self._index] if self._items else None

    @property
    def value(self) -> Any:
        item = self.selected
        return item.value if item is not None else None

    @property
    def shown(self) -> bool:
        return self._future is not None and not self._future.done()

    def __len__(self) -> int:
        return len(self._items)

    def show(self) -> asyncio.Future:
        """Draw the list from the first item and wait for the next :meth:`select`.

        Showing a list that is already waiting returns the pending future untouched.
        """
        if self.shown:
            return self._future
        self._index = 0
        self._top = 0
        future = asyncio.get_running_loop().create_future()
        self._future = future
        self._render()
        return future

    def previous(self) -> None:
        if not self._items:
            logger.debug("previous() on an empty list ignored")
            return
        if self._index == 0:
            self._index = len(self._items) - 1
            self._top = max(len(self._items) - self._height, 0)
        else:
            self._index -= 1
            if self._top > self._index:
                self._top = self._index
        self._render()

    def next(self) -> None:
        if not self._items:
            logger.debug("next() on an empty list ignored")
            return
        if self._index == len(self._items) - 1:
            self._index = 0
            self._top = 0
        else:
            self._index += 1
            if self._top < self._index + 1 - self._height:
                self._top = self._index + 1 - self._height
        self._render()

    def select(self) -> None:
        self._stop_rolling()
        if not self._items:
            logger.debug("select() on an empty list ignored")
            return
        future, self._future = self._future, None
        if future is not None and not future.done():
            future.set_result(self.selected.value)

    def clear(self) -> None:
        """Blank the screen, leaving any pending :meth:`show` unresolved."""
        self._stop_rolling()
        self.screen.clear()

    def _render(self) -> None:
        self.screen.clear()
        for i in range(self._height):
            index = self._top + i
            if index >= len(self._items):
                break
            prefix = self.selected_prefix if index == self._index else self.prefix
            self.screen.set_cursor(0, i)
            self.screen.print(prefix + truncate(self._items[index].text, self._width - len(prefix)))
        self._roll_selected()

    def _roll_selected(self) -> None:
        self._stop_rolling()
        item = self.selected
        available = self._width - len(self.selected_prefix)
        if item is None or len(item.text) <= available:
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.debug("No running event loop, %r will not roll", item.text)
            return
        self._rolling = _Rolling(item.text, self.rolling_padding, available, self._index - self._top)
        self._rolling_task = loop.create_task(self._roll(self._rolling))

    async def _roll(self, rolling:_Rolling) -> None:
        try:
            while True:
                await asyncio.sleep(self.rolling_interval)
                window = rolling.tick()
                if window is not None:
                    self.screen.set_cursor(len(self.selected_prefix), rolling.row)
                    self.screen.print(window)
        except asyncio.CancelledError:
            pass

    def _stop_rolling(self) -> None:
        if self._rolling_task is not None:
            self._rolling_task.cancel()
            self._rolling_task = None
        self._rolling = None

def _is_branch(node:Mapping) -> bool:
    return bool(node.get("items"))

def menu_list(screen:Screen, data:Sequence[Mapping], root:bool = False) -> List:
    """Build a :class:`List` of :class:`MenuValue` items from nested node mappings.

    Each node is either ``{"text": ..., "value": ...}`` or ``{"text": ..., "items": [...]}``.
    Every list below the root ends with a ``..`` item holding :data:`UP`. A leaf whose value is
    :data:`UP` goes up a level too, which at the root ends the session.
    """
    items = []
    for node in data:
        if _is_branch(node):
            items.append(ListItem(node["text"], MenuValue.nested(menu_list(screen, node["items"]))))
        elif node.get("value") is UP:
            items.append(ListItem(node["text"], UP))
        else:
            items.append(ListItem(node["text"], MenuValue.of(node.get("value"))))
    if not root:
        items.append(ListItem(UP_TEXT, UP))
    return List(screen, items)

class Menu:
    """Navigates a tree of :func:`menu_list` lists until a value is chosen.

    :param screen: Display shared by every level of the menu.
    :param data: Root level nodes, see :func:`menu_list`.
    """

    def __init__(self, screen:Screen, data:Sequence[Mapping]):
        self.screen = screen
        self._root = menu_list(screen, data, True)
        self._active = None

    @property
    def root(self) -> List:
        return self._root

    @property
    def active(self) -> List|None:
        return self._active

    def _waiting(self) -> bool:
        # Between a select() and show() resuming, the active list is no longer waiting.
        return self._active is not None and self._active.shown

    def previous(self) -> None:
        if self._waiting():
            self._active.previous()

    def next(self) -> None:
        if self._waiting():
            self._active.next()

    def select(self) -> None:
        if self._waiting():
            self._active.select()

    async def show(self) -> Any:
        """Run one session from the root list.

        :return: The payload of the chosen item, or ``None`` when the user leaves the root.
        """
        if self._active is not None:
            logger.warning("Menu is already shown")
            return None
        stack = []
        self._active = self._root
        try:
            while True:
                result = await self._active.show()
                if result.kind is ItemKind.LIST:
                    logger.debug("Descending to level %d", len(stack) + 1)
                    stack.append(self._active)
                    self._active = result.payload
                elif result.kind is ItemKind.UP:
                    if not stack:
                        logger.debug("Left the root list")
                        return None
                    logger.debug("Ascending to level %d", len(stack) - 1)
                    self._active = stack.pop()
                else:
                    logger.debug("Selected %r", result.payload)
                    return result.payload
        finally:
            self._active.clear()
            self._active = None

    def hide(self) -> None:
        if self._active is not None:
            self._active.clear()
