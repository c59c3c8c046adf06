"""Batched drawing of UI rectangles and text, and the list of root elements."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Protocol, Sequence, Union

from .theme import Color, UIElementTheme, Vec2

# Floats per vertex: pos(2), tex_coords(2), tex_id(1), color(4), radius(1), element_size(2).
ROW_LENGTH = 2 + 2 + 1 + 4 + 1 + 2
MAX_VERTICES = 1024
MAX_INDICES = 1024
MAX_TEXTURES = 16

GlyphEmitter = Callable[[Any, Sequence[Sequence[float]], Sequence[Sequence[float]]], None]


class Font(Protocol):
    """What the renderer needs from a font."""

    def text_size(self, font_size: int, text: str) -> Vec2:
        """Return the pixel size of ``text`` at ``font_size``."""

    def draw_text(
        self, font_size: int, text: str, x: float, y: float, emit: GlyphEmitter
    ) -> Vec2:
        """Lay out ``text`` and hand its glyph vertices to ``emit``; return the size used."""


class Drawable(Protocol):
    """A root element the renderer draws every update."""

    def draw(self, renderer: UIRenderer, outer_bounds: Vec2, inner_bounds: Vec2) -> None:
        """Draw the element within the given bounds."""


@dataclass
class Batch:
    """Vertex rows, indices and textures gathered for one draw call."""

    vertices: list[float] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    textures: list[Any] = field(default_factory=list)
    vertex_count: int = 0
    resolution: Vec2 = field(default_factory=Vec2)

    @property
    def rows(self) -> list[list[float]]:
        """The vertex data split into one row per vertex."""
        return [
            self.vertices[start : start + ROW_LENGTH]
            for start in range(0, len(self.vertices), ROW_LENGTH)
        ]


class UIRenderer:
    """Collects UI geometry into batches and hands full batches to ``submit``.

    ``viewport_size`` is either a Vec2 or a callable returning the current one.
    """

    def __init__(
        self,
        viewport_size: Union[Vec2, Callable[[], Vec2]],
        submit: Callable[[Batch], None],
    ) -> None:
        self._viewport = viewport_size
        self._submit = submit
        self._batch = Batch()
        self._elements: list[Drawable] = []

    @property
    def viewport_size(self) -> Vec2:
        return self._viewport() if callable(self._viewport) else self._viewport

    @property
    def batch(self) -> Batch:
        """The batch currently being filled."""
        return self._batch

    @property
    def elements(self) -> tuple[Drawable, ...]:
        return tuple(self._elements)

    def add_texture(self, texture: Any) -> float:
        """Return the batch slot of ``texture``, adding it if needed; -1.0 for none."""
        if texture is None:
            return -1.0
        for index, known in enumerate(self._batch.textures):
            if known is texture:
                return float(index)
        if len(self._batch.textures) >= MAX_TEXTURES:
            self.flush()
        self._batch.textures.append(texture)
        return float(len(self._batch.textures) - 1)

    def _append_rows(
        self,
        tex_id: float,
        color: Color,
        radius: float,
        element_size: Vec2,
        positions: Sequence[Sequence[float]],
        tcoords: Sequence[Sequence[float]],
    ) -> None:
        for position, (u, v) in zip(positions, tcoords):
            self._batch.vertices.extend(
                (
                    float(position[0]),
                    float(position[1]),
                    float(u),
                    float(v),
                    tex_id,
                    color.r,
                    color.g,
                    color.b,
                    color.a,
                    float(radius),
                    float(element_size.x),
                    float(element_size.y),
                )
            )

    def draw(
        self,
        texture: Any,
        color: Color,
        vertices: Sequence[Sequence[float]],
        tcoords: Sequence[Sequence[float]],
        indices: Sequence[int],
        radius: int,
        element_size: Vec2,
    ) -> None:
        """Add a shape given as (x, y) vertices, (u, v) coordinates and local indices."""
        vertices = list(vertices)
        tcoords = list(tcoords)
        indices = list(indices)
        if len(tcoords) != len(vertices):
            raise ValueError("every vertex needs exactly one texture coordinate")
        if len(vertices) > MAX_VERTICES:
            raise ValueError(f"a shape may have at most {MAX_VERTICES} vertices")

        if (
            self._batch.vertex_count + len(vertices) > MAX_VERTICES
            or len(self._batch.indices) + len(indices) > MAX_INDICES
        ):
            self.flush()

        tex_id = self.add_texture(texture)
        batch = self._batch
        self._append_rows(tex_id, color, radius, element_size, vertices, tcoords)
        batch.indices.extend(index + batch.vertex_count for index in indices)
        batch.vertex_count += len(vertices)

    def draw_rect(
        self, texture: Any, color: Color, radius: int, position: Vec2, size: Vec2
    ) -> None:
        """Add a rectangle placed by its top-left corner, in pixels."""
        viewport = self.viewport_size
        x = position.x / viewport.x * 2.0 - 1.0
        y = 1.0 - position.y / viewport.y * 2.0
        w = size.x / viewport.x * 2.0
        h = size.y / viewport.y * 2.0

        vertices = [(x, y), (x + w, y), (x + w, y - h), (x, y - h)]
        tcoords = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]
        indices = [0, 1, 2, 2, 3, 0]
        self.draw(texture, color, vertices, tcoords, indices, radius, size)

    def _emit_glyphs(
        self,
        theme: UIElementTheme,
        atlas: Any,
        vertices: Sequence[Sequence[float]],
        tcoords: Sequence[Sequence[float]],
    ) -> None:
        if atlas is None:
            raise ValueError("glyphs need a texture atlas")
        vertices = list(vertices)
        if self._batch.vertex_count + len(vertices) > MAX_VERTICES:
            self.flush()

        tex_id = self.add_texture(atlas)
        batch = self._batch
        self._append_rows(tex_id, theme.font_color, 0, Vec2(0, 0), vertices, tcoords)
        batch.indices.extend(range(batch.vertex_count, batch.vertex_count + len(vertices)))
        batch.vertex_count += len(vertices)

    @staticmethod
    def _require_font(theme: UIElementTheme) -> Font:
        if theme is None:
            raise ValueError("a theme is required")
        if theme.font is None:
            raise ValueError("the theme has no font")
        return theme.font

    def draw_text(self, theme: UIElementTheme, text: str, position: Vec2) -> Vec2:
        """Add ``text`` in the theme's font and colour; return the size it used."""
        font = self._require_font(theme)

        def emit(atlas: Any, vertices: Sequence[Sequence[float]], tcoords: Sequence[Sequence[float]]) -> None:
            self._emit_glyphs(theme, atlas, vertices, tcoords)

        return font.draw_text(theme.font_size, text, float(position.x), float(position.y), emit)

    def get_text_size(self, theme: UIElementTheme, text: str) -> Vec2:
        """Return the size ``text`` would take in the theme's font."""
        return self._require_font(theme).text_size(theme.font_size, text)

    def flush(self) -> None:
        """Submit the current batch if it holds any vertices, then start a new one."""
        batch, self._batch = self._batch, Batch()
        if batch.vertices:
            batch.resolution = self.viewport_size
            self._submit(batch)

    def add_element(self, element: Drawable) -> None:
        """Register a root element to be drawn on every update."""
        self._elements.append(element)

    def remove_element(self, element: Drawable) -> None:
        """Unregister a root element; unknown elements are ignored."""
        for index, known in enumerate(self._elements):
            if known is element:
                del self._elements[index]
                return

    def update(self, delta_time: float) -> None:
        """Draw every root element within the viewport and flush the batch."""
        outer_bounds = self.viewport_size
        inner_bounds = Vec2(0, 0)
        for element in list(self._elements):
            element.draw(self, outer_bounds, inner_bounds)
        self.flush()