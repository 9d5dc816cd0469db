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
Replays laid-out page buffers onto a reportlab canvas.
"""

import logging
from io import BytesIO
from typing import Dict, List, Optional

from reportlab.lib import colors
from reportlab.lib.units import mm
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen import canvas

from cv_layout.cursor import DrawOp, LineOp, TextOp

logger = logging.getLogger(__name__)


class PdfRenderer:
    """
    Draws page buffers (mm, top-left origin) into a PDF (points, bottom-left
    origin). Output is built with ``invariant=1`` so identical input always
    gives identical bytes.
    """

    def __init__(self, page_width: float, page_height: float, metadata: Optional[Dict[str, str]] = None):
        self.page_width = page_width
        self.page_height = page_height
        self.metadata = metadata or {}

    def _y(self, y: float) -> float:
        return (self.page_height - y) * mm

    def _set_metadata(self, pdf: canvas.Canvas):
        meta = self.metadata
        if meta.get("title"):
            pdf.setTitle(meta["title"])
        if meta.get("author"):
            pdf.setAuthor(meta["author"])
        if meta.get("subject"):
            pdf.setSubject(meta["subject"])
        if meta.get("keywords"):
            pdf.setKeywords(meta["keywords"])
        if meta.get("creator"):
            pdf.setCreator(meta["creator"])

    def _draw_text(self, pdf: canvas.Canvas, op: TextOp):
        pdf.setFont(op.font, op.size)
        pdf.setFillColor(colors.HexColor(op.color))
        x, y = op.x * mm, self._y(op.y)
        if op.align == "right":
            pdf.drawRightString(x, y, op.text)
        elif op.align == "center":
            pdf.drawCentredString(x, y, op.text)
        else:
            pdf.drawString(x, y, op.text)

        if op.link:
            width = stringWidth(op.text, op.font, op.size)
            if op.align == "right":
                x -= width
            elif op.align == "center":
                x -= width / 2
            pdf.linkURL(op.link, (x, y - op.size * 0.25, x + width, y + op.size * 0.85), relative=0)

    def _draw_line(self, pdf: canvas.Canvas, op: LineOp):
        pdf.setStrokeColor(colors.HexColor(op.color))
        # Widths are given in mm like every other length.
        pdf.setLineWidth(op.width * mm)
        pdf.line(op.x1 * mm, self._y(op.y1), op.x2 * mm, self._y(op.y2))

    def render(self, pages: List[List[DrawOp]]) -> bytes:
        """Returns the finished PDF document as bytes."""
        buffer = BytesIO()
        pdf = canvas.Canvas(buffer, pagesize=(self.page_width * mm, self.page_height * mm), invariant=1)
        self._set_metadata(pdf)

        for number, ops in enumerate(pages, start=1):
            for op in ops:
                if isinstance(op, TextOp):
                    self._draw_text(pdf, op)
                else:
                    self._draw_line(pdf, op)
            logger.debug(f"Rendered page {number} ({len(ops)} ops)")
            pdf.showPage()

        pdf.save()
        return buffer.getvalue()
