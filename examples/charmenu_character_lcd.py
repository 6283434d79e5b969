# SPDX-FileCopyrightText: 2017 Scott Shawcroft, written for Adafruit Industries
# SPDX-FileCopyrightText: Copyright (c) 2024 Cooper Dalrymple
#
# SPDX-License-Identifier: Unlicense

import asyncio

import board
import digitalio
import adafruit_debouncer
import adafruit_character_lcd.character_lcd as character_lcd

import charmenu
import charmenu.character_lcd

lcd_rs = digitalio.DigitalInOut(board.GP0)
lcd_en = digitalio.DigitalInOut(board.GP1)
lcd_d7 = digitalio.DigitalInOut(board.GP2)
lcd_d6 = digitalio.DigitalInOut(board.GP3)
lcd_d5 = digitalio.DigitalInOut(board.GP4)
lcd_d4 = digitalio.DigitalInOut(board.GP5)
lcd_backlight = digitalio.DigitalInOut(board.GP6)

COLUMNS = 16
ROWS = 2

lcd = character_lcd.Character_LCD_Mono(lcd_rs, lcd_en, lcd_d4, lcd_d5, lcd_d6, lcd_d7, COLUMNS, ROWS, lcd_backlight)

menu = charmenu.Menu(charmenu.character_lcd.Screen(lcd, COLUMNS, ROWS), (
    {"text": "Play", "value": "play"},
    {"text": "Simple Items", "items": (
        {"text": "Number", "value": 1},
        {"text": "Bool", "value": True},
        {"text": "A label long enough to roll across the screen", "value": "long"},
    )},
    {"text": "Settings", "items": (
        {"text": "Brightness", "items": (
            {"text": "Low", "value": 0.25},
            {"text": "High", "value": 1.0},
        )},
        {"text": "Reset", "value": "reset"},
    )},
))

button_pins = (
    digitalio.DigitalInOut(board.GP7),
    digitalio.DigitalInOut(board.GP8),
    digitalio.DigitalInOut(board.GP9),
    digitalio.DigitalInOut(board.GP10),
)
buttons = []
for pin in button_pins:
    pin.direction = digitalio.Direction.INPUT
    buttons.append(adafruit_debouncer.Debouncer(pin))
buttons = tuple(buttons)

async def poll_buttons():
    while True:
        for button in buttons:
            button.update()

        if buttons[0].fell:
            menu.previous()
        if buttons[1].fell:
            menu.next()
        if buttons[2].fell:
            menu.select()
        if buttons[3].fell:
            menu.hide()

        await asyncio.sleep(0.01)

async def main():
    asyncio.create_task(poll_buttons())
    while True:
        result = await menu.show()
        lcd.message = "Chose {}".format(result)
        await asyncio.sleep(2)

asyncio.run(main())
