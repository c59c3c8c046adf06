import pytest

from lunarsprites.theme import Color, UIElementTheme, Vec2
from lunarsprites.ui import MAX_TEXTURES, MAX_VERTICES, ROW_LENGTH, Batch, UIRenderer


class FakeFont:
    def __init__(self):
        self.atlas = object()
        self.calls = []

    def text_size(self, font_size, text):
        return Vec2(10 * len(text), font_size)

    def draw_text(self, font_size, text, x, y, emit):
        self.calls.append((text, x, y))
        for offset, _ in enumerate(text):
            left = x + offset * 10
            emit(
                self.atlas,
                [(left, y, 0.0), (left + 10, y, 0.0), (left, y + font_size, 0.0)],
                [(0.0, 0.0), (1.0, 0.0), (0.0, 1.0)],
            )
        return self.text_size(font_size, text)


class RecordingElement:
    def __init__(self):
        self.calls = []

    def draw(self, renderer, outer_bounds, inner_bounds):
        self.calls.append((outer_bounds, inner_bounds))
        renderer.draw_rect(None, Color(), 0, Vec2(0, 0), Vec2(10, 10))


@pytest.fixture
def submitted():
    return []


@pytest.fixture
def renderer(submitted):
    return UIRenderer(Vec2(100, 100), submitted.append)


def test_add_texture_none_is_minus_one(renderer):
    assert renderer.add_texture(None) == -1.0


def test_add_texture_reuses_slots(renderer):
    first, second = object(), object()
    assert renderer.add_texture(first) == 0.0
    assert renderer.add_texture(second) == 1.0
    assert renderer.add_texture(first) == 0.0
    assert renderer.batch.textures == [first, second]


def test_draw_rect_full_viewport_covers_clip_space(renderer):
    color = Color(0.1, 0.2, 0.3, 0.4)
    renderer.draw_rect(None, color, 7, Vec2(0, 0), Vec2(100, 100))
    batch = renderer.batch
    assert batch.vertex_count == 4
    rows = batch.rows
    assert [tuple(row[:2]) for row in rows] == [(-1.0, 1.0), (1.0, 1.0), (1.0, -1.0), (-1.0, -1.0)]
    assert rows[0] == [-1.0, 1.0, 0.0, 0.0, -1.0, 0.1, 0.2, 0.3, 0.4, 7.0, 100.0, 100.0]
    assert all(len(row) == ROW_LENGTH for row in rows)


def test_indices_are_offset_by_vertex_count(renderer):
    renderer.draw_rect(None, Color(), 0, Vec2(0, 0), Vec2(10, 10))
    renderer.draw_rect(None, Color(), 0, Vec2(20, 20), Vec2(10, 10))
    batch = renderer.batch
    assert batch.indices[:6] == [0, 1, 2, 2, 3, 0]
    assert batch.indices[6:] == [index + 4 for index in [0, 1, 2, 2, 3, 0]]
    assert batch.vertex_count == 8


def test_flush_of_empty_batch_submits_nothing(renderer, submitted):
    renderer.flush()
    assert renderer.batch == Batch()
    assert renderer.batch.vertex_count == 0
    assert submitted == []


def test_flush_sets_resolution_and_resets(renderer, submitted):
    renderer.draw_rect(None, Color(), 0, Vec2(0, 0), Vec2(5, 5))
    renderer.flush()
    assert submitted[0].resolution == Vec2(100, 100)
    assert renderer.batch == Batch()


def test_viewport_may_be_callable(submitted):
    sizes = [Vec2(100, 100)]
    renderer = UIRenderer(lambda: sizes[-1], submitted.append)
    sizes.append(Vec2(200, 50))
    assert renderer.viewport_size == Vec2(200, 50)


def test_texture_slots_overflow_flushes(renderer, submitted):
    textures = [object() for _ in range(MAX_TEXTURES + 1)]
    for texture in textures[:MAX_TEXTURES]:
        renderer.draw_rect(texture, Color(), 0, Vec2(0, 0), Vec2(1, 1))
    assert submitted == []
    renderer.draw_rect(textures[-1], Color(), 0, Vec2(0, 0), Vec2(1, 1))
    assert len(submitted) == 1
    assert submitted[0].textures == textures[:MAX_TEXTURES]
    assert renderer.batch.textures == [textures[-1]]
    assert renderer.batch.rows[0][4] == 0.0


def test_draw_too_many_vertices_raises(renderer):
    vertices = [(0.0, 0.0)] * (MAX_VERTICES + 1)
    with pytest.raises(ValueError):
        renderer.draw(None, Color(), vertices, vertices, [], 0, Vec2(0, 0))


def test_draw_mismatched_tcoords_raises(renderer):
    with pytest.raises(ValueError):
        renderer.draw(None, Color(), [(0.0, 0.0)], [], [0], 0, Vec2(0, 0))


def test_draw_text_uses_font_color(renderer, submitted):
    font = FakeFont()
    theme = UIElementTheme(font_color=Color(0.5, 0.6, 0.7, 0.8), font_size=12, font=font)
    size = renderer.draw_text(theme, "ab", Vec2(3, 4))
    assert size == font.text_size(12, "ab")
    assert font.calls == [("ab", 3.0, 4.0)]
    renderer.flush()
    rows = submitted[0].rows
    assert len(rows) == 6
    assert all(row[5:9] == [0.5, 0.6, 0.7, 0.8] for row in rows)
    assert all(row[9:] == [0.0, 0.0, 0.0] for row in rows)
    assert submitted[0].indices == list(range(6))
    assert submitted[0].textures == [font.atlas]


def test_get_text_size_uses_theme_font(renderer):
    font = FakeFont()
    theme = UIElementTheme(font_size=30, font=font)
    assert renderer.get_text_size(theme, "hello") == font.text_size(30, "hello")


def test_text_without_font_raises(renderer):
    with pytest.raises(ValueError):
        renderer.get_text_size(UIElementTheme(), "x")
    with pytest.raises(ValueError):
        renderer.draw_text(UIElementTheme(), "x", Vec2(0, 0))


def test_update_draws_elements_and_flushes(renderer, submitted):
    element = RecordingElement()
    renderer.add_element(element)
    renderer.update(0.016)
    assert element.calls == [(Vec2(100, 100), Vec2(0, 0))]
    assert len(submitted) == 1


def test_remove_element(renderer, submitted):
    first, second = RecordingElement(), RecordingElement()
    renderer.add_element(first)
    renderer.add_element(second)
    renderer.remove_element(first)
    renderer.remove_element(RecordingElement())
    assert renderer.elements == (second,)
    renderer.update(0.0)
    assert first.calls == []
    assert len(second.calls) == 1