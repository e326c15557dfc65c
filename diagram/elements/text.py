"""
Text leaf and text measurement.

Glyph shaping is out of scope: text is sized by a TextMeasurer. The
default ApproximateTextMeasurer uses a fixed average glyph width, which is
enough for layout. A renderer with real font metrics can supply its own
measurer.

Usage:
    label = Text(content="Hello\\nworld", font_size=14)
    label.absolute_segments()   # one box per line, in artboard space
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Protocol, runtime_checkable

from diagram.core.config import TextConfig
from diagram.core.geometry import Box, Size
from diagram.elements.shape import Shape


@dataclass(frozen=True)
class TextMetrics:
    """
    Measured text.

    Attributes:
        width: Width of the widest segment
        height: Total height of all lines
        segments: One box per line, relative to the content top-left
    """
    width: float
    height: float
    segments: List[Box] = field(default_factory=list)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)


@runtime_checkable
class TextMeasurer(Protocol):
    """Anything that can measure a text run."""

    def measure(self, content: str, font_size: float, line_height: float) -> TextMetrics:
        ...


class ApproximateTextMeasurer:
    """
    Heuristic measurer.

    Each character is char_width * font_size wide; each line is
    font_size * line_height tall.
    """

    def __init__(self, char_width: float = 0.6):
        if char_width <= 0:
            raise ValueError(f"char_width must be positive: {char_width}")
        self.char_width = char_width

    def measure(self, content: str, font_size: float, line_height: float) -> TextMetrics:
        advance = font_size * self.char_width
        line_px = font_size * line_height

        segments = []
        for index, line in enumerate(content.split("\n")):
            segments.append(Box(0.0, index * line_px, len(line) * advance, line_px))

        width = max(segment.width for segment in segments)
        return TextMetrics(width, line_px * len(segments), segments)


DEFAULT_MEASURER = ApproximateTextMeasurer()


class Text(Shape):
    """
    Measured text leaf.

    With auto dimensions the content box wraps the measured text.
    """

    config_type = TextConfig

    def __init__(self, config=None, measurer: Optional[TextMeasurer] = None, **options):
        super().__init__(config, **options)
        self.measurer: TextMeasurer = measurer or DEFAULT_MEASURER
        self._metrics: Optional[TextMetrics] = None

    @property
    def content(self) -> str:
        return self.config.content

    @property
    def font_size(self) -> float:
        return self.config.font_size

    @property
    def line_height(self) -> float:
        return self.config.line_height

    def set_content(self, content: str) -> 'Text':
        """Change the text (fluent)."""
        self.config.content = content
        self._metrics = None
        self.invalidate()
        return self

    def set_measurer(self, measurer: TextMeasurer) -> 'Text':
        self.measurer = measurer
        self._metrics = None
        self.invalidate()
        return self

    @property
    def metrics(self) -> TextMetrics:
        """Cached measurement of the current content."""
        if self._metrics is None:
            self._metrics = self.measurer.measure(
                self.content, self.font_size, self.line_height
            )
        return self._metrics

    def intrinsic_size(self) -> Optional[Size]:
        return self.metrics.size

    def absolute_segments(self) -> List[Box]:
        """Line boxes translated into artboard space."""
        origin = self.content_box.top_left
        return [segment.translate(origin.x, origin.y) for segment in self.metrics.segments]
