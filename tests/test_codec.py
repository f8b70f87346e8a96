# test_codec.py

from tinted.attributes import Attribute, RESET_ATTRIBUTES
from tinted.codec import (
    RESET_SEQUENCE, reset_code, sequence, set_code, sgr_bytes, unset_code,
)


class TestSequence:
    def test_joins_codes_with_semicolons(self):
        assert sequence([Attribute.BOLD, Attribute.FG_RED, 4]) == "1;31;4"

    def test_empty_sequence(self):
        assert sequence([]) == ""

    def test_raw_codes_are_not_validated(self):
        assert sequence([38, 5, 999]) == "38;5;999"


class TestSetAndUnset:
    """Per-attribute reset pairing."""

    def test_bold_red(self):
        attrs = [Attribute.BOLD, Attribute.FG_RED]
        assert set_code(attrs) == "\x1b[1;31m"
        assert unset_code(attrs) == "\x1b[22;0m"

    def test_unset_keeps_relative_order(self):
        attrs = [Attribute.BG_BLUE, Attribute.UNDERLINE, Attribute.ITALIC]
        assert unset_code(attrs) == "\x1b[0;24;23m"

    def test_faint_and_bold_share_a_reset(self):
        assert reset_code(Attribute.FAINT) == reset_code(Attribute.BOLD) == 22

    def test_blinks_share_a_reset(self):
        assert reset_code(Attribute.BLINK_SLOW) == reset_code(Attribute.BLINK_RAPID) == 25

    def test_every_effect_has_a_dedicated_reset(self):
        effects = [Attribute.BOLD, Attribute.FAINT, Attribute.ITALIC, Attribute.UNDERLINE,
                   Attribute.BLINK_SLOW, Attribute.BLINK_RAPID, Attribute.REVERSE_VIDEO,
                   Attribute.CONCEALED, Attribute.CROSSED_OUT]
        assert set(RESET_ATTRIBUTES) == set(effects)
        assert [reset_code(a) for a in effects] == [22, 22, 23, 24, 25, 25, 27, 28, 29]

    def test_colors_and_raw_codes_reset_generically(self):
        assert reset_code(Attribute.FG_HI_GREEN) == 0
        assert reset_code(Attribute.BG_HI_WHITE) == 0
        assert unset_code([38, 5, 148]) == "\x1b[0;0;0m"

    def test_duplicates_are_kept(self):
        attrs = [Attribute.BOLD, Attribute.BOLD]
        assert set_code(attrs) == "\x1b[1;1m"
        assert unset_code(attrs) == "\x1b[22;22m"

    def test_output_is_deterministic(self):
        attrs = [Attribute.CROSSED_OUT, Attribute.FG_CYAN]
        assert set_code(attrs) == set_code(list(attrs))
        assert unset_code(attrs) == unset_code(list(attrs))


class TestSgrBytes:
    def test_builds_bytes(self):
        assert sgr_bytes(Attribute.FG_GREEN, Attribute.BOLD) == b"\x1b[32;1m"

    def test_no_attributes_defaults_to_bold(self):
        assert sgr_bytes() == b"\x1b[1m"

    def test_reset_sequence(self):
        assert RESET_SEQUENCE == "\x1b[0m"
