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
Cursor/page state for one generation pass.

The cursor is the single source of truth for where the next line goes and
whether a page break is needed first. It does not draw anything: it records
draw instructions into per-page buffers which the renderer replays once the
pass is finalized. Coordinates are millimetres measured from the top-left
corner of the page; ``y`` of a text op is its baseline.
"""

import enum
import logging
from dataclasses import dataclass
from typing import List, Union

from cv_layout.styles import Margins

logger = logging.getLogger(__name__)


class CursorFinalizedError(RuntimeError):
    """Raised when a finalized cursor is asked to lay out more content."""


class CursorState(enum.Enum):
    WRITING = "writing"
    FINALIZED = "finalized"


@dataclass(frozen=True)
class TextOp:
    x: float
    y: float
    text: str
    font: str
    size: float
    color: str = "#000000"
    align: str = "left"
    link: str = ""


@dataclass(frozen=True)
class LineOp:
    x1: float
    y1: float
    x2: float
    y2: float
    width: float
    color: str = "#000000"


DrawOp = Union[TextOp, LineOp]


class PageCursor:
    """
    Tracks the vertical write position across pages.

    Formatters call ``ensure_space`` before writing any block whose height
    they know, then ``write``/``rule`` and finally ``advance``. ``write``
    never checks space on its own so a formatter can keep a heading together
    with the first line of its body.
    """

    def __init__(self, page_width: float, page_height: float, margins: Margins):
        self.page_width = page_width
        self.page_height = page_height
        self.margins = margins
        self.y = margins.top
        self.page_index = 0
        self.pages: List[List[DrawOp]] = [[]]
        self.state = CursorState.WRITING

    @property
    def content_left(self) -> float:
        return self.margins.left

    @property
    def content_right(self) -> float:
        return self.page_width - self.margins.right

    @property
    def content_width(self) -> float:
        return self.content_right - self.content_left

    @property
    def bottom_limit(self) -> float:
        return self.page_height - self.margins.bottom

    @property
    def remaining(self) -> float:
        return self.bottom_limit - self.y

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def _check_writable(self):
        if self.state is CursorState.FINALIZED:
            raise CursorFinalizedError("Cursor is finalized; no further content can be laid out")

    def _at_page_top(self) -> bool:
        return self.y <= self.margins.top and not self.pages[self.page_index]

    def ensure_space(self, required_height: float) -> bool:
        """
        Starts a new page if ``required_height`` does not fit below the
        cursor. Returns True when a break happened.

        A fresh, empty page is never broken again: a block taller than the
        whole content area is written and allowed to run over.
        """
        self._check_writable()
        if self.y + required_height <= self.bottom_limit:
            return False
        if self._at_page_top():
            logger.debug(f"Block of {required_height:.1f}mm exceeds an empty page; writing anyway")
            return False
        self.new_page()
        return True

    def new_page(self):
        self._check_writable()
        self.pages.append([])
        self.page_index += 1
        self.y = self.margins.top
        logger.debug(f"Page break -> page {self.page_index + 1}")

    def advance(self, delta: float):
        self._check_writable()
        self.y += delta

    def write(self, text: str, x: float, font: str, size: float,
              color: str = "#000000", align: str = "left", link: str = ""):
        self._check_writable()
        if not text:
            return
        self.pages[self.page_index].append(
            TextOp(x=x, y=self.y, text=text, font=font, size=size, color=color, align=align, link=link)
        )

    def rule(self, x1: float, x2: float, offset: float = 0.0, width: float = 0.8, color: str = "#000000"):
        """Draws a horizontal line ``offset`` mm below the cursor."""
        self._check_writable()
        y = self.y + offset
        self.pages[self.page_index].append(LineOp(x1=x1, y1=y, x2=x2, y2=y, width=width, color=color))

    def finalize(self) -> List[List[DrawOp]]:
        """Closes the pass and hands back the page buffers."""
        self._check_writable()
        self.state = CursorState.FINALIZED
        return self.pages
