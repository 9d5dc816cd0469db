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
Style profiles: every visual difference between output styles lives here as
data. The engine code has no per-style branches.

Lengths are millimetres on an A4 page, font sizes are points.
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping

logger = logging.getLogger(__name__)

DEFAULT_STYLE = "classic"


@dataclass(frozen=True)
class Margins:
    top: float = 15.0
    right: float = 15.0
    bottom: float = 15.0
    left: float = 15.0


@dataclass(frozen=True)
class FontSizes:
    name: float = 20
    title: float = 12
    section_header: float = 12
    body: float = 10
    small: float = 9
    contact: float = 10


@dataclass(frozen=True)
class ColorRoles:
    text: str = "#000000"
    heading: str = "#000000"
    rule: str = "#000000"
    link: str = "#0000FF"
    muted: str = "#000000"


# Section keys in the order the assembler renders them.
SECTION_TITLES = {
    "summary": "Professional Summary",
    "work": "Professional Experience",
    "education": "Education",
    "skills": "Skills",
    "projects": "Projects",
    "certifications": "Certifications",
    "extracurricular": "Extracurricular Activities",
}


@dataclass(frozen=True)
class StyleProfile:
    key: str
    display_name: str
    file_label: str
    margins: Margins = field(default_factory=Margins)
    fonts: FontSizes = field(default_factory=FontSizes)
    colors: ColorRoles = field(default_factory=ColorRoles)
    page_width: float = 210.0
    page_height: float = 297.0
    font_family: str = "helvetica"
    contact_font_family: str = "helvetica"
    line_height: float = 1.2
    section_spacing: float = 6.0
    header_align: str = "left"
    rule_width: float = 0.8
    rule_position: str = "below"
    # Rule y relative to the cursor: under the title line ("below") or its baseline ("above").
    # Positive values sit lower on the page.
    rule_offset: float = -1.0
    header_gap: float = 8.0
    contact_gap: float = 4.0
    entry_spacing: float = 4.0
    work_entry_spacing: float = 6.0
    bullet_indent: float = 8.0
    contact_layout: str = "inline"
    skills_separator: str = " • "
    group_skills_by_category: bool = False
    section_titles: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "section_titles", MappingProxyType(dict(self.section_titles)))

    def title_for(self, section: str) -> str:
        return self.section_titles.get(section, SECTION_TITLES[section])


CLASSIC = StyleProfile(
    key="classic",
    display_name="Classic (ATS-Optimized)",
    file_label="Classic",
)

MODERN = StyleProfile(
    key="modern",
    display_name="Modern",
    file_label="Modern",
    fonts=FontSizes(name=22, title=13, section_header=12, body=10, small=9, contact=10),
    font_family="times",
    contact_font_family="times",
    header_align="center",
    contact_gap=6.0,
)

MINIMAL = StyleProfile(
    key="minimal",
    display_name="Minimal",
    file_label="Minimal",
    margins=Margins(20, 20, 20, 20),
    fonts=FontSizes(name=18, title=11, section_header=11, body=10, small=9, contact=9),
    colors=ColorRoles(rule="#969696"),
    line_height=1.3,
    section_spacing=8.0,
    rule_width=0.5,
    header_gap=6.0,
    contact_gap=6.0,
    contact_layout="stacked",
    skills_separator=", ",
    section_titles={"summary": "Summary", "work": "Experience", "extracurricular": "Activities"},
)

PROFESSIONAL = StyleProfile(
    key="professional",
    display_name="Professional",
    file_label="Professional",
    rule_offset=0.5,
    header_gap=6.0,
    contact_layout="columns",
    contact_gap=6.0,
)

EXECUTIVE = StyleProfile(
    key="executive",
    display_name="Executive",
    file_label="Executive",
    fonts=FontSizes(name=16, title=11, section_header=12, body=10, small=9, contact=10),
    colors=ColorRoles(text="#2C3E50", heading="#2C3E50", rule="#3498DB", link="#3498DB", muted="#34495E"),
    rule_position="above",
    rule_offset=-2.0,
    header_gap=4.0,
    group_skills_by_category=True,
    section_titles={"skills": "Core Competencies", "projects": "Key Projects",
                    "extracurricular": "Additional Activities"},
)

TECH = StyleProfile(
    key="tech",
    display_name="Tech Professional",
    file_label="Tech",
    margins=Margins(20, 20, 20, 20),
    fonts=FontSizes(name=22, title=12, section_header=14, body=10, small=9, contact=10),
    colors=ColorRoles(text="#374151", heading="#1F2937", rule="#3B82F6", link="#3B82F6", muted="#374151"),
    line_height=1.4,
    rule_width=0.5,
    header_gap=5.0,
    group_skills_by_category=True,
    section_titles={"skills": "Technical Skills"},
)

PROFILES: Dict[str, StyleProfile] = {
    p.key: p for p in (CLASSIC, MODERN, MINIMAL, PROFESSIONAL, EXECUTIVE, TECH)
}

# Alternative ids accepted from callers. Template ids without a dedicated
# print layout ("creative", "academic") share the default.
ALIASES = {
    "classic-ats": "classic",
    "modern-centered": "modern",
    "minimal-spacious": "minimal",
    "enhanced": "executive",
    "text": "tech",
    "creative": "classic",
    "academic": "classic",
}


def resolve_style_key(style_id: str) -> str:
    """Maps a style/template id to a profile key, falling back to the default."""
    key = (style_id or "").strip().lower()
    key = ALIASES.get(key, key)
    if key in PROFILES:
        return key
    if key:
        logger.warning(f"Unknown style '{style_id}'. Falling back to '{DEFAULT_STYLE}'.")
    return DEFAULT_STYLE


def get_profile(style_id: str) -> StyleProfile:
    return PROFILES[resolve_style_key(style_id)]


def available_styles() -> List[StyleProfile]:
    return list(PROFILES.values())
