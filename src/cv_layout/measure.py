# Copyright 2026 Justin Cook
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Text measurement and line wrapping.

Widths come from the AFM metrics of the PDF standard fonts that reportlab
ships, so what we measure here is exactly what the canvas draws later.
All lengths returned are millimetres.
"""

from typing import List, Optional

from reportlab.lib.units import mm
from reportlab.pdfbase.pdfmetrics import stringWidth

# Line advance per point of font size, in mm, before the profile multiplier.
PT_LINE_FACTOR = 0.35

_FONTS = {
    "helvetica": {"normal": "Helvetica", "bold": "Helvetica-Bold", "italic": "Helvetica-Oblique"},
    "times": {"normal": "Times-Roman", "bold": "Times-Bold", "italic": "Times-Italic"},
    "courier": {"normal": "Courier", "bold": "Courier-Bold", "italic": "Courier-Oblique"},
}


def font_name(family: str, weight: str = "normal") -> str:
    """Maps a (family, weight) pair to a standard Type1 font name."""
    faces = _FONTS.get((family or "").lower(), _FONTS["helvetica"])
    return faces.get(weight, faces["normal"])


def text_width(text: str, family: str, size: float, weight: str = "normal") -> float:
    """Rendered width of ``text`` in mm."""
    if not text:
        return 0.0
    return stringWidth(text, font_name(family, weight), size) / mm


def line_height(size: float, multiplier: float) -> float:
    return size * multiplier * PT_LINE_FACTOR


def wrap_text(
    text: str,
    family: str,
    size: float,
    max_width: float,
    weight: str = "normal",
    first_line_width: Optional[float] = None,
) -> List[str]:
    """
    Greedy word wrap.

    Args:
        text: Free text; runs of whitespace (including newlines) collapse to
            single spaces.
        family, size, weight: Font used for measuring.
        max_width: Available width in mm.
        first_line_width: Optional narrower width for the first line only.

    Returns:
        The wrapped lines, in order. Words are never split: a word wider than
        the line is placed alone and allowed to overflow. Blank input gives
        an empty list.
    """
    words = (text or "").split()
    if not words:
        return []

    font = font_name(family, weight)
    space = stringWidth(" ", font, size) / mm
    limit = first_line_width if first_line_width is not None else max_width

    lines: List[str] = []
    current: List[str] = []
    current_width = 0.0
    for word in words:
        word_width = stringWidth(word, font, size) / mm
        if not current:
            current = [word]
            current_width = word_width
            continue
        if current_width + space + word_width <= limit:
            current.append(word)
            current_width += space + word_width
        else:
            lines.append(" ".join(current))
            limit = max_width
            current = [word]
            current_width = word_width
    lines.append(" ".join(current))
    return lines
