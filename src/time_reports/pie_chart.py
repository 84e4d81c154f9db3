"""Activity time pie chart: slice geometry and PNG rendering.

Angles follow Pillow's ``ImageDraw.pieslice`` convention: 0 degrees is the
3 o'clock position and angles grow clockwise on screen, because the image
y axis points down. Label positions use the same convention, so
``x = cx + r * cos(theta)`` and ``y = cy + r * sin(theta)``.
"""

from __future__ import annotations

import io
import logging
import math
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional, Sequence, Union

from PIL import Image, ImageDraw, ImageFont

from .config import ChartSettings
from .errors import EmptyDataError, ZeroTotalError
from .models import ActivityRecord, ChartSlice
from .sources import DataProvider, parse_activities
from .writer import write_bytes_atomic

logger = logging.getLogger(__name__)

Color = tuple[int, int, int]
Font = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]

PALETTE: tuple[Color, ...] = (
    (63, 114, 175),
    (204, 76, 70),
    (92, 169, 93),
    (250, 192, 94),
)
BACKGROUND: Color = (255, 255, 255)
BORDER: Color = (169, 169, 169)
TITLE_COLOR: Color = (0, 0, 0)
LABEL_COLOR: Color = (255, 255, 255)
LEGEND_TEXT_COLOR: Color = (0, 0, 0)

LABEL_RADIUS_RATIO = 0.7
LEGEND_OFFSET = 30
LEGEND_SWATCH = 15
LEGEND_TEXT_OFFSET = 25
LEGEND_ROW_HEIGHT = 25

_REGULAR_FONT = "DejaVuSans.ttf"
_BOLD_FONT = "DejaVuSans-Bold.ttf"


@dataclass(slots=True)
class PieChartResult:
    output_path: Path
    slices: list[ChartSlice]
    total_minutes: int


def palette_color(index: int) -> Color:
    return PALETTE[index % len(PALETTE)]


def compute_slices(records: Sequence[ActivityRecord]) -> list[ChartSlice]:
    """Convert activity minutes into percentages and sweep angles.

    Raises :class:`ZeroTotalError` when there is nothing to divide: an empty
    sequence or minutes that sum to zero.
    """
    total = sum(record.minutes for record in records)
    if total == 0:
        raise ZeroTotalError()
    return [
        ChartSlice(
            activity=record.activity,
            minutes=record.minutes,
            percentage_of_total=record.minutes / total * 100,
            sweep_angle_degrees=record.minutes / total * 360,
        )
        for record in records
    ]


def slice_spans(slices: Sequence[ChartSlice]) -> list[tuple[float, float]]:
    """Return ``(start_angle, sweep)`` for each slice.

    Each start angle is the running sum of the sweeps before it, so adjacent
    slices share an edge exactly.
    """
    spans: list[tuple[float, float]] = []
    start = 0.0
    for item in slices:
        spans.append((start, item.sweep_angle_degrees))
        start += item.sweep_angle_degrees
    return spans


def label_position(
    center: tuple[float, float], radius: float, start: float, sweep: float
) -> tuple[float, float]:
    """Point on the bisector of a slice at ``LABEL_RADIUS_RATIO`` of the radius."""
    theta = math.radians(start + sweep / 2)
    label_radius = radius * LABEL_RADIUS_RATIO
    cx, cy = center
    return (cx + label_radius * math.cos(theta), cy + label_radius * math.sin(theta))


def render_pie_chart(
    slices: Sequence[ChartSlice], settings: Optional[ChartSettings] = None
) -> Image.Image:
    """Draw the chart, its percentage labels and a legend onto a new RGB image."""
    settings = settings or ChartSettings()
    image = Image.new("RGB", (settings.width, settings.height), BACKGROUND)
    try:
        _draw_chart(image, slices, settings)
    except BaseException:
        image.close()
        raise
    return image


def _draw_chart(image: Image.Image, slices: Sequence[ChartSlice], settings: ChartSettings) -> None:
    draw = ImageDraw.Draw(image)

    title_font = _load_font(_BOLD_FONT, settings.title_font_size)
    label_font = _load_font(_BOLD_FONT, settings.label_font_size)
    legend_font = _load_font(_REGULAR_FONT, settings.legend_font_size)

    title_width, _ = _text_size(draw, settings.title, title_font)
    draw.text(
        ((settings.width - title_width) / 2, settings.padding / 2),
        settings.title,
        font=title_font,
        fill=TITLE_COLOR,
    )

    left, top, right, bottom = settings.chart_box
    center = ((left + right) / 2, (top + bottom) / 2)
    radius = settings.chart_size / 2
    legend_x = right + LEGEND_OFFSET
    legend_y = top

    for index, (item, (start, sweep)) in enumerate(zip(slices, slice_spans(slices))):
        color = palette_color(index)

        if sweep > 0:
            draw.pieslice(
                [left, top, right, bottom],
                start=start,
                end=start + sweep,
                fill=color,
                outline=BORDER,
            )
            label_x, label_y = label_position(center, radius, start, sweep)
            _draw_centered_text(draw, (label_x, label_y), item.label, label_font, LABEL_COLOR)

        draw.rectangle(
            [legend_x, legend_y, legend_x + LEGEND_SWATCH, legend_y + LEGEND_SWATCH],
            fill=color,
            outline=BORDER,
        )
        draw.text(
            (legend_x + LEGEND_TEXT_OFFSET, legend_y),
            item.legend_text,
            font=legend_font,
            fill=LEGEND_TEXT_COLOR,
        )
        legend_y += LEGEND_ROW_HEIGHT


def encode_png(image: Image.Image) -> bytes:
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


def generate_pie_chart(
    provider: DataProvider,
    output_path: Path,
    settings: Optional[ChartSettings] = None,
) -> PieChartResult:
    """Fetch activities, compute slices, render and write the PNG chart."""
    records = parse_activities(provider() or [])
    if not records:
        raise EmptyDataError("Data is empty or could not be deserialized.")

    slices = compute_slices(records)
    total = sum(record.minutes for record in records)
    logger.info("Total Minutes Worked: %d", total)

    with render_pie_chart(slices, settings) as image:
        data = encode_png(image)
    path = write_bytes_atomic(output_path, data)
    logger.info("Pie chart written to %s", path)
    return PieChartResult(output_path=path, slices=slices, total_minutes=total)


@lru_cache(maxsize=None)
def _load_font(name: str, size: int) -> Font:
    try:
        return ImageFont.truetype(name, size=size)
    except OSError:
        logger.debug("Font %s unavailable; using Pillow's default font.", name)
        return ImageFont.load_default(size=size)


def _text_size(draw: ImageDraw.ImageDraw, text: str, font: Font) -> tuple[float, float]:
    bbox = draw.textbbox((0, 0), text, font=font)
    return bbox[2] - bbox[0], bbox[3] - bbox[1]


def _draw_centered_text(
    draw: ImageDraw.ImageDraw,
    center: tuple[float, float],
    text: str,
    font: Font,
    fill: Color,
) -> None:
    left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
    x = center[0] - (right - left) / 2 - left
    y = center[1] - (bottom - top) / 2 - top
    draw.text((x, y), text, font=font, fill=fill)
