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
Assembles a paginated PDF from CVData.
"""

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from cv_layout.cursor import DrawOp, PageCursor
from cv_layout.formatters import FORMATTERS, SECTION_ORDER, format_header
from cv_layout.models import CVData
from cv_layout.render import PdfRenderer
from cv_layout.styles import StyleProfile, get_profile

# Logger is configured in main.py
logger = logging.getLogger(__name__)


class DocumentGenerationError(Exception):
    """The PDF could not be produced. No partial document is returned."""


@dataclass
class LayoutResult:
    pages: List[List[DrawOp]]
    profile: StyleProfile

    @property
    def page_count(self) -> int:
        return len(self.pages)


@dataclass
class GeneratedDocument:
    content: bytes
    file_name: str
    page_count: int
    style: str


def suggested_file_name(full_name: str, profile: StyleProfile) -> str:
    """
    Derives a download name, e.g. "Ada_Lovelace_Classic_CV.pdf".
    Falls back to "Classic_CV.pdf" when the name is empty or has nothing usable.
    """
    safe_name = re.sub(r'[^\w\s-]', '', full_name or '')
    safe_name = re.sub(r'[-\s]+', '_', safe_name).strip('-_')
    if safe_name:
        return f"{safe_name[:60]}_{profile.file_label}_CV.pdf"
    return f"{profile.file_label}_CV.pdf"


class CVGenerator:
    """
    Lays out a CV with one style profile and renders it to PDF.

    A generator holds no per-document state: every call builds its own
    cursor, so one instance can serve any number of documents.
    """

    def __init__(self, include_metadata: bool = True):
        self.include_metadata = include_metadata

    def layout(self, cv: CVData, style_id: Optional[str] = None) -> LayoutResult:
        """
        Runs every section formatter over a fresh cursor.

        Args:
            cv (CVData): The structured CV data.
            style_id (str): Style/template id; defaults to ``cv.template_id``.
        """
        profile = get_profile(style_id if style_id is not None else cv.template_id)
        cursor = PageCursor(profile.page_width, profile.page_height, profile.margins)

        format_header(cursor, profile, cv.personal_info)
        sections = {
            "summary": cv.personal_info,
            "work": cv.work_experience,
            "education": cv.education,
            "skills": cv.skills,
            "projects": cv.projects,
            "certifications": cv.certifications,
            "extracurricular": cv.extracurricular,
        }
        for key in SECTION_ORDER:
            FORMATTERS[key](cursor, profile, sections[key])

        pages = cursor.finalize()
        logger.debug(f"Laid out {len(pages)} page(s) with style '{profile.key}'")
        return LayoutResult(pages=pages, profile=profile)

    def _metadata(self, cv: CVData, profile: StyleProfile) -> dict:
        if not self.include_metadata:
            return {}
        return {
            "title": f"{profile.display_name} CV",
            "author": cv.personal_info.full_name,
            "subject": "Curriculum Vitae",
            "keywords": f"cv, resume, {profile.key}",
            "creator": "cv-layout",
        }

    def generate(self, cv: CVData, style_id: Optional[str] = None) -> GeneratedDocument:
        """
        Main entry point: lays out and renders the document.

        Returns:
            GeneratedDocument: PDF bytes plus the suggested file name.

        Raises:
            DocumentGenerationError: if the PDF backend fails.
        """
        result = self.layout(cv, style_id)
        profile = result.profile
        renderer = PdfRenderer(profile.page_width, profile.page_height, self._metadata(cv, profile))
        try:
            content = renderer.render(result.pages)
        except Exception as e:
            raise DocumentGenerationError(f"Failed to render PDF: {e}") from e

        file_name = suggested_file_name(cv.personal_info.full_name, profile)
        logger.info(f"CV generated: {file_name} ({result.page_count} page(s), style '{profile.key}')")
        return GeneratedDocument(content=content, file_name=file_name,
                                 page_count=result.page_count, style=profile.key)

    def to_bytes(self, cv: CVData, style_id: Optional[str] = None) -> bytes:
        """Returns the PDF as an in-memory blob (for upload or preview)."""
        return self.generate(cv, style_id).content

    def save(self, cv: CVData, output_path: Optional[Union[str, Path]] = None,
             output_dir: Union[str, Path] = ".", style_id: Optional[str] = None) -> Path:
        """
        Writes the PDF to disk and returns its path.

        Without ``output_path`` the file lands in ``output_dir`` under the
        suggested name. The bytes written are exactly those ``generate``
        returns.
        """
        document = self.generate(cv, style_id)
        path = Path(output_path) if output_path else Path(output_dir) / document.file_name
        if path.parent and not path.parent.exists():
            os.makedirs(path.parent, exist_ok=True)
            logger.info(f"Created output directory: {path.parent}")
        path.write_bytes(document.content)
        logger.info(f"Saved PDF to: {path}")
        return path


def generate_pdf(cv: CVData, style_id: Optional[str] = None) -> GeneratedDocument:
    return CVGenerator().generate(cv, style_id)


def save_pdf(cv: CVData, output_path: Optional[Union[str, Path]] = None,
             output_dir: Union[str, Path] = ".", style_id: Optional[str] = None) -> Path:
    return CVGenerator().save(cv, output_path, output_dir, style_id)
