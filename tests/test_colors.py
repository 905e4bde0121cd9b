"""Tests for the color normalizer."""

import pytest

from stylestats.analyzer.colors import ColorNormalizer, normalize_colors


@pytest.fixture
def normalizer():
    return ColorNormalizer()


# ---------------------------------------------------------------------------
# Hex colors
# ---------------------------------------------------------------------------


class TestHexColors:
    def test_short_hex_expands(self, normalizer):
        assert normalizer.normalize("#abc") == ["#AABBCC"]

    def test_long_hex_is_idempotent(self, normalizer):
        assert normalizer.normalize("#AABBCC") == ["#AABBCC"]
        assert normalizer.normalize(normalizer.normalize("#a1b2c3")[0]) == ["#A1B2C3"]

    def test_important_is_stripped(self, normalizer):
        assert normalizer.normalize("#fff !important") == ["#FFFFFF"]

    def test_only_first_hex_token_is_taken(self, normalizer):
        assert normalizer.normalize("1px solid #fff, #000") == ["#FFFFFF"]


# ---------------------------------------------------------------------------
# rgb() / rgba()
# ---------------------------------------------------------------------------


class TestRgbColors:
    def test_rgb(self, normalizer):
        assert normalizer.normalize("rgb(0,0,0)") == ["#000000"]

    def test_rgba_ignores_alpha(self, normalizer):
        assert normalizer.normalize("rgba(255,255,255,0.5)") == ["#FFFFFF"]

    def test_rgb_with_spaces(self, normalizer):
        assert normalizer.normalize("rgb( 16 , 32 , 255 )") == ["#1020FF"]

    def test_channels_are_clamped(self, normalizer):
        assert normalizer.normalize("rgb(300, 0, 0)") == ["#FF0000"]

    def test_rgb_wins_over_hex(self, normalizer):
        assert normalizer.normalize("rgb(1, 2, 3) #fff") == ["#010203"]


# ---------------------------------------------------------------------------
# Named colors
# ---------------------------------------------------------------------------


class TestNamedColors:
    def test_named_color_is_uppercased(self, normalizer):
        assert normalizer.normalize("1px solid Red") == ["RED"]

    def test_all_named_colors_are_returned(self, normalizer):
        assert normalizer.normalize("white url(bg.png) no-repeat, blue") == ["WHITE", "BLUE"]

    def test_word_boundaries(self, normalizer):
        assert normalizer.normalize("darkblue") == ["DARKBLUE"]
        assert normalizer.normalize("reddish") == []

    def test_custom_named_colors(self):
        assert ColorNormalizer(["brand"]).normalize("Brand") == ["BRAND"]

    def test_no_named_colors(self):
        assert ColorNormalizer([]).normalize("red") == []


# ---------------------------------------------------------------------------
# Values without reportable colors
# ---------------------------------------------------------------------------


class TestNoColor:
    def test_gradient_is_skipped(self, normalizer):
        assert normalizer.normalize("linear-gradient(#fff, #000)") == []
        assert normalizer.normalize("radial-gradient(red, rgb(0, 0, 0))") == []

    @pytest.mark.parametrize("value", [
        "transparent",
        "TRANSPARENT",
        "transparent !important",
        "!important transparent",
        "inherit",
        "Inherit !important",
    ])
    def test_transparent_and_inherit(self, normalizer, value):
        assert normalizer.normalize(value) == []

    def test_unparseable(self, normalizer):
        assert normalizer.normalize("none") == []
        assert normalizer.normalize("hsl(0, 100%, 50%)") == []


def test_normalize_colors_shortcut():
    assert normalize_colors("#abc") == ["#AABBCC"]
    assert normalize_colors("red", named_colors=[]) == []
