import pytest

from lunarsprites.theme import Color, UIElementTheme, Vec2


def test_vec2_add_then_sub_round_trips():
    a = Vec2(7, 11)
    b = Vec2(3, 5)
    assert (a + b) - b == a
    assert (a - b) + b == a


def test_vec2_add_is_commutative():
    a = Vec2(2, 9)
    b = Vec2(4, 1)
    assert a + b == b + a


def test_vec2_zero_is_identity():
    a = Vec2(13, 17)
    assert a + Vec2() == a
    assert a - Vec2() == a
    assert a - a == Vec2()


def test_vec2_rejects_non_vectors():
    with pytest.raises(TypeError):
        Vec2(1, 1) + 1
    with pytest.raises(TypeError):
        Vec2(1, 1) - (1, 1)


def test_color_default_alpha_is_opaque():
    assert Color().a == 1.0


def test_theme_copy_is_independent():
    font = object()
    theme = UIElementTheme(
        background_color=Color(0.2, 0.2, 0.2, 1.0),
        border_color=Color(0.5, 0.5, 0.5, 1.0),
        radius=10,
        border_size=2,
        font_color=Color(1.0, 1.0, 1.0, 1.0),
        font_size=64,
        font=font,
    )
    clone = theme.copy()
    assert clone == theme
    clone.font_size = 12
    clone.radius = 0
    assert theme.font_size == 64
    assert theme.radius == 10
    assert clone.font is font


def test_theme_defaults_are_distinct_instances():
    first = UIElementTheme()
    second = UIElementTheme()
    first.border_size = 3
    assert second.border_size == 0
    assert first.background_color == second.background_color