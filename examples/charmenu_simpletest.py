# SPDX-FileCopyrightText: 2017 Scott Shawcroft, written for Adafruit Industries
# SPDX-FileCopyrightText: Copyright (c) 2024 Cooper Dalrymple
#
# SPDX-License-Identifier: Unlicense

import asyncio

import charmenu
import charmenu.buffer

async def main():
    screen = charmenu.buffer.Screen(16, 2)
    menu = charmenu.Menu(screen, (
        {"text": "Action 1", "value": 1},
        {"text": "More", "items": (
            {"text": "Action 2", "value": 2},
        )},
    ))

    session = asyncio.create_task(menu.show())
    await asyncio.sleep(0)
    print(screen)  # "> Action 1" above "  More"

    menu.next()  # Navigate from "Action 1" to "More"
    menu.select()  # Enter "More"
    await asyncio.sleep(0)
    menu.select()  # Choose "Action 2"

    print(await session)  # Prints 2 in REPL

asyncio.run(main())
