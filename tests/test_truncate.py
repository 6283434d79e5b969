# SPDX-FileCopyrightText: Copyright (c) 2024 Cooper Dalrymple
#
# SPDX-License-Identifier: MIT

import pytest

from charmenu import truncate

SAMPLES = (
    "",
    "Hello",
    "  Hello  ",
    "Hello World",
    "Hello World Foo",
    "a          bcdefgh",
    "x" * 40,
    "Settings / Brightness / Backlight",
)


class TestTruncate:
    def test_short_text_is_kept(self):
        assert truncate("Hello", 10) == "Hello"

    def test_exact_fit_is_kept(self):
        assert truncate("Hello", 5) == "Hello"

    def test_whitespace_is_trimmed_first(self):
        assert truncate("  Hello  ", 5) == "Hello"

    def test_long_text_gets_ellipsis(self):
        assert truncate("Hello World Foo", 10) == "Hello W..."

    def test_trailing_space_of_cut_is_dropped(self):
        assert truncate("Hello World", 9) == "Hello..."

    def test_custom_ellipsis(self):
        assert truncate("Hello World", 8, "~") == "Hello W~"

    @pytest.mark.parametrize("max_length, expected", [(3, "..."), (2, ".."), (0, ""), (-1, "")])
    def test_max_length_below_ellipsis_is_clamped(self, max_length, expected):
        assert truncate("Hello World", max_length) == expected

    @pytest.mark.parametrize("text", SAMPLES)
    def test_length_never_exceeds_max(self, text):
        for max_length in range(3, 24):
            assert len(truncate(text, max_length)) <= max_length

    @pytest.mark.parametrize("text", SAMPLES)
    def test_idempotent(self, text):
        for max_length in range(3, 24):
            once = truncate(text, max_length)
            assert truncate(once, max_length) == once
