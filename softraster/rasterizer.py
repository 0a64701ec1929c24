"""A software rasteriser that draws into in-memory colour and depth buffers."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Iterable

from softraster.color import Color32, LinearColor
from softraster.mathutil import equals_in_tolerance
from softraster.screenpoint import ScreenPoint
from softraster.vector2 import Vector2
from softraster.vector4 import Vector4

_LEFT = 0b0001
_RIGHT = 0b0010
_BOTTOM = 0b0100
_TOP = 0b1000


def test_region(position: Vector2, min_pos: Vector2, max_pos: Vector2) -> int:
    """Cohen-Sutherland outcode of a point against a clip rectangle."""
    code = 0
    if position.x < min_pos.x:
        code |= _LEFT
    elif position.x > max_pos.x:
        code |= _RIGHT

    if position.y < min_pos.y:
        code |= _BOTTOM
    elif position.y > max_pos.y:
        code |= _TOP
    return code


def cohen_sutherland_line_clip(
    start: Vector2, end: Vector2, min_pos: Vector2, max_pos: Vector2
) -> tuple[Vector2, Vector2] | None:
    """Clip a segment to a rectangle; None when nothing of it is visible."""
    start_code = test_region(start, min_pos, max_pos)
    end_code = test_region(end, min_pos, max_pos)

    width = end.x - start.x
    height = end.y - start.y

    while True:
        if start_code == 0 and end_code == 0:
            return start, end
        if start_code & end_code:
            return None

        clip_start = start_code != 0
        code = start_code if clip_start else end_code

        if code < _BOTTOM:
            x = min_pos.x if code & _LEFT else max_pos.x
            if equals_in_tolerance(height, 0.0):
                y = start.y
            else:
                y = start.y + height * (x - start.x) / width
        else:
            y = min_pos.y if code & _BOTTOM else max_pos.y
            if equals_in_tolerance(width, 0.0):
                x = start.x
            else:
                x = start.x + width * (y - start.y) / height

        clipped = Vector2(x, y)
        if clip_start:
            start = clipped
            start_code = test_region(start, min_pos, max_pos)
        else:
            end = clipped
            end_code = test_region(end, min_pos, max_pos)


class RendererInterface(ABC):
    """The drawing operations a renderer offers."""

    @abstractmethod
    def init(self, size: ScreenPoint) -> bool: ...

    @abstractmethod
    def shutdown(self) -> None: ...

    @abstractmethod
    def is_initialized(self) -> bool: ...

    @abstractmethod
    def clear(self, color: LinearColor) -> None: ...

    @abstractmethod
    def begin_frame(self) -> None: ...

    @abstractmethod
    def end_frame(self) -> None: ...

    @abstractmethod
    def draw_point(self, position: Vector2 | ScreenPoint, color: LinearColor) -> None: ...

    @abstractmethod
    def draw_line(
        self, start: Vector2 | Vector4, end: Vector2 | Vector4, color: LinearColor
    ) -> None: ...

    @abstractmethod
    def get_depth_buffer_value(self, position: ScreenPoint) -> float: ...

    @abstractmethod
    def set_depth_buffer_value(self, position: ScreenPoint, depth: float) -> None: ...

    @abstractmethod
    def draw_full_vertical_line(self, x: int, color: LinearColor) -> None: ...

    @abstractmethod
    def draw_full_horizontal_line(self, y: int, color: LinearColor) -> None: ...

    @abstractmethod
    def push_statistic_text(self, text: str) -> None: ...

    @abstractmethod
    def push_statistic_texts(self, texts: Iterable[str]) -> None: ...


class SoftwareRenderer(RendererInterface):
    """Renders into a colour buffer and a depth buffer held in memory."""

    def __init__(self) -> None:
        self._initialized = False
        self._screen_size = ScreenPoint()
        self._screen_buffer: list[Color32] | None = None
        self._depth_buffer: list[float] | None = None
        self._statistic_texts: list[str] = []
        self.presented_texts: list[str] = []

    @property
    def screen_size(self) -> ScreenPoint:
        return self._screen_size

    @property
    def screen_buffer(self) -> tuple[Color32, ...]:
        """The colour buffer, row by row from the top left."""
        return tuple(self._screen_buffer) if self._screen_buffer is not None else ()

    @property
    def statistic_texts(self) -> list[str]:
        """Texts queued for the current frame."""
        return list(self._statistic_texts)

    def init(self, size: ScreenPoint) -> bool:
        """Allocate buffers of the given size; False if the size is unusable."""
        self._release()
        if size.x <= 0 or size.y <= 0:
            return False
        self._screen_size = size
        count = size.x * size.y
        self._screen_buffer = [Color32(0, 0, 0, 0)] * count
        self._depth_buffer = [math.inf] * count
        self._initialized = True
        return True

    def _release(self) -> None:
        self._screen_buffer = None
        self._depth_buffer = None
        self._initialized = False

    def shutdown(self) -> None:
        self._release()

    def is_initialized(self) -> bool:
        return self._initialized

    def clear(self, color: LinearColor) -> None:
        self.fill_buffer(color.to_color32())
        self.clear_depth_buffer()

    def begin_frame(self) -> None:
        pass

    def end_frame(self) -> None:
        """Present the frame and drop the queued statistic texts."""
        if not self._initialized:
            return
        self.presented_texts = list(self._statistic_texts)
        self._statistic_texts.clear()

    def fill_buffer(self, color: Color32) -> None:
        if not self._initialized or self._screen_buffer is None:
            return
        self._screen_buffer = [color] * (self._screen_size.x * self._screen_size.y)

    def clear_depth_buffer(self) -> None:
        if self._depth_buffer is not None:
            self._depth_buffer = [math.inf] * len(self._depth_buffer)

    def _is_in_screen(self, position: ScreenPoint) -> bool:
        return 0 <= position.x < self._screen_size.x and 0 <= position.y < self._screen_size.y

    def _index(self, position: ScreenPoint) -> int:
        return position.y * self._screen_size.x + position.x

    def get_pixel(self, position: ScreenPoint) -> LinearColor:
        """Colour at a pixel; the error colour outside the screen."""
        if self._screen_buffer is None or not self._is_in_screen(position):
            return LinearColor.ERROR
        return LinearColor.from_color32(self._screen_buffer[self._index(position)])

    def set_pixel_opaque(self, position: ScreenPoint, color: LinearColor) -> None:
        if self._screen_buffer is None or not self._is_in_screen(position):
            return
        self._screen_buffer[self._index(position)] = color.to_color32()

    def set_pixel_alpha_blending(self, position: ScreenPoint, color: LinearColor) -> None:
        """Blend over the existing pixel by the colour's alpha."""
        buffer_color = self.get_pixel(position)
        if self._screen_buffer is None or not self._is_in_screen(position):
            return
        blended = color * color.a + buffer_color * (1.0 - color.a)
        self._screen_buffer[self._index(position)] = blended.to_color32()

    def _set_pixel(self, position: ScreenPoint, color: LinearColor) -> None:
        self.set_pixel_opaque(position, color)

    def draw_point(self, position: Vector2 | ScreenPoint, color: LinearColor) -> None:
        """Draw at a pixel, or at a Cartesian position centred on the screen."""
        if isinstance(position, ScreenPoint):
            self._set_pixel(position, color)
        elif isinstance(position, Vector2):
            self._set_pixel(ScreenPoint.to_screen_coordinate(self._screen_size, position), color)
        else:
            raise TypeError(f"cannot draw a point at {type(position).__name__}")

    def draw_line(
        self, start: Vector2 | Vector4, end: Vector2 | Vector4, color: LinearColor
    ) -> None:
        """Clip a line to the screen and draw it with Bresenham's algorithm."""
        if isinstance(start, Vector4):
            start = start.to_vector2()
        if isinstance(end, Vector4):
            end = end.to_vector2()
        if not isinstance(start, Vector2) or not isinstance(end, Vector2):
            raise TypeError("line end points must be Vector2 or Vector4")

        extent = Vector2(self._screen_size.x, self._screen_size.y) * 0.5
        clipped = cohen_sutherland_line_clip(start, end, -extent, extent)
        if clipped is None:
            return

        start_point = ScreenPoint.to_screen_coordinate(self._screen_size, clipped[0])
        end_point = ScreenPoint.to_screen_coordinate(self._screen_size, clipped[1])

        width = end_point.x - start_point.x
        height = end_point.y - start_point.y

        gradual = abs(width) >= abs(height)
        dx = 1 if width >= 0 else -1
        dy = 1 if height > 0 else -1
        fw = dx * width
        fh = dy * height

        f = fh * 2 - fw if gradual else 2 * fw - fh
        f1 = 2 * fh if gradual else 2 * fw
        f2 = 2 * (fh - fw) if gradual else 2 * (fw - fh)
        x, y = start_point.x, start_point.y

        if gradual:
            while x != end_point.x:
                self._set_pixel(ScreenPoint(x, y), color)
                if f < 0:
                    f += f1
                else:
                    f += f2
                    y += dy
                x += dx
        else:
            while y != end_point.y:
                self._set_pixel(ScreenPoint(x, y), color)
                if f < 0:
                    f += f1
                else:
                    f += f2
                    x += dx
                y += dy

    def get_depth_buffer_value(self, position: ScreenPoint) -> float:
        """Depth at a pixel; infinity outside the screen or without a buffer."""
        if self._depth_buffer is None or not self._is_in_screen(position):
            return math.inf
        return self._depth_buffer[self._index(position)]

    def set_depth_buffer_value(self, position: ScreenPoint, depth: float) -> None:
        if self._depth_buffer is None or not self._is_in_screen(position):
            return
        self._depth_buffer[self._index(position)] = depth

    def draw_full_vertical_line(self, x: int, color: LinearColor) -> None:
        if not 0 <= x < self._screen_size.x:
            return
        for y in range(self._screen_size.y):
            self._set_pixel(ScreenPoint(x, y), color)

    def draw_full_horizontal_line(self, y: int, color: LinearColor) -> None:
        if not 0 <= y < self._screen_size.y:
            return
        for x in range(self._screen_size.x):
            self._set_pixel(ScreenPoint(x, y), color)

    def push_statistic_text(self, text: str) -> None:
        self._statistic_texts.append(text)

    def push_statistic_texts(self, texts: Iterable[str]) -> None:
        self._statistic_texts.extend(texts)