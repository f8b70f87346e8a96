# test_strip.py

import pytest

from tinted.attributes import Attribute
from tinted.codec import set_code, unset_code
from tinted.strip import strip_ansi, visible_length


class TestStripAnsi:
    """Removal of escape sequences from text and bytes."""

    @pytest.mark.parametrize("attrs", [
        [Attribute.BOLD, Attribute.FG_RED],
        [38, 5, 148],
        [Attribute.UNDERLINE, Attribute.BG_HI_YELLOW, Attribute.CROSSED_OUT],
        [],
    ])
    def test_removes_codes_produced_by_the_codec(self, attrs):
        assert strip_ansi(set_code(attrs) + "X" + unset_code(attrs)) == "X"

    def test_bytes_in_bytes_out(self):
        assert strip_ansi(b"\x1b[1;31mhello\x1b[22;0m") == b"hello"

    def test_bytearray_is_accepted(self):
        assert strip_ansi(bytearray(b"\x1b[4mu\x1b[24m")) == b"u"

    def test_preserves_surrounding_content(self):
        text = "a \x1b[32mb\x1b[0m c\n\x1b[1md\x1b[22m"
        assert strip_ansi(text) == "a b c\nd"

    def test_cursor_movement_and_clear(self):
        assert strip_ansi("\x1b[2J\x1b[Htop\x1b[?25l") == "top"

    def test_osc_title_terminated_by_bell(self):
        assert strip_ansi("\x1b]0;title\x07body") == "body"

    def test_eight_bit_csi(self):
        assert strip_ansi("\x9b31mred\x9b0m") == "red"
        assert strip_ansi("\x9b31mred".encode("utf-8")) == b"red"

    def test_multibyte_utf8_is_not_mangled(self):
        # "ě" encodes as C4 9B; the 0x9b byte must not start a match
        raw = "ě31m".encode("utf-8")
        assert strip_ansi(raw) == raw

    def test_text_without_codes_is_unchanged(self):
        assert strip_ansi("plain [text] 100%") == "plain [text] 100%"

    def test_idempotent(self):
        text = "\x1b[1m\x1b[38;5;206mns\x1b[0m \x1b]2;t\x07ok"
        once = strip_ansi(text)
        assert strip_ansi(once) == once

    def test_visible_length(self):
        assert visible_length("\x1b[1;31mabc\x1b[22;0m") == 3
