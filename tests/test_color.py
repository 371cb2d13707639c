import pytest

from colorbuf import BLACK, TRANSPARENT, WHITE, Color, blend_with_gamma


def test_opaque_foreground_hides_background():
    result = blend_with_gamma(BLACK, WHITE, 2.2)
    assert result.r == pytest.approx(1.0)
    assert result.g == pytest.approx(1.0)
    assert result.b == pytest.approx(1.0)
    assert result.a == pytest.approx(1.0)


def test_transparent_foreground_keeps_background():
    assert blend_with_gamma(WHITE, TRANSPARENT, 2.2) == WHITE
    assert blend_with_gamma(WHITE, TRANSPARENT, 1.0) == WHITE


def test_half_alpha_mixes_in_linear_light():
    half_white = Color(1.0, 1.0, 1.0, 0.5)
    result = blend_with_gamma(BLACK, half_white, 2.2)
    assert result.r == pytest.approx(0.5 ** (1 / 2.2))
    assert result.a == pytest.approx(1.0)


def test_gamma_one_is_plain_over():
    fg = Color(0.8, 0.2, 0.4, 0.25)
    bg = Color(0.2, 0.6, 0.0, 0.5)
    result = blend_with_gamma(bg, fg, 1.0)
    assert result.r == pytest.approx(0.8 * 0.25 + 0.2 * 0.75)
    assert result.g == pytest.approx(0.2 * 0.25 + 0.6 * 0.75)
    assert result.b == pytest.approx(0.4 * 0.25)
    assert result.a == pytest.approx(0.25 + 0.5 * 0.75)


def test_alpha_union():
    result = blend_with_gamma(Color(0.0, 0.0, 0.0, 0.5), Color(0.0, 0.0, 0.0, 0.5), 2.2)
    assert result.a == pytest.approx(0.75)


def test_negative_channel_is_a_domain_error():
    with pytest.raises(ValueError):
        blend_with_gamma(BLACK, Color(-0.5, 0.0, 0.0, 1.0), 2.2)


def test_zero_gamma_fails():
    with pytest.raises(ZeroDivisionError):
        blend_with_gamma(BLACK, WHITE, 0.0)


def test_color_is_a_value():
    assert Color.opaque(0.1, 0.2, 0.3) == Color(0.1, 0.2, 0.3, 1.0)
    with pytest.raises(AttributeError):
        WHITE.r = 0.0
