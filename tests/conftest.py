# SPDX-FileCopyrightText: Copyright (c) 2024 Cooper Dalrymple
#
# SPDX-License-Identifier: MIT

import asyncio

import pytest

import charmenu.buffer


class RecordingScreen(charmenu.buffer.Screen):
    """Buffer screen that also keeps every print with the cursor it was made at."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.prints = []
        self.clears = 0

    def print(self, text):
        self.prints.append((self.cursor, text))
        super().print(text)

    def clear(self):
        self.clears += 1
        super().clear()


async def settle(rounds=3):
    """Let tasks woken by a resolved future run."""
    for _ in range(rounds):
        await asyncio.sleep(0)


@pytest.fixture
def screen():
    return RecordingScreen(16, 2)
