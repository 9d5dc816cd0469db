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
Section formatters.

Each ``format_*`` function takes the shared cursor, the active style profile
and its slice of the CV, lays the section out and leaves the cursor below
it. Empty sections write nothing and do not move the cursor.
"""

import logging
import re
from collections import OrderedDict
from typing import Callable, Dict, List, NamedTuple, Optional, Sequence

from cv_layout.cursor import PageCursor
from cv_layout.measure import font_name, line_height, text_width, wrap_text
from cv_layout.models import (
    Certification,
    Education,
    Extracurricular,
    PersonalInfo,
    Project,
    Skill,
    WorkExperience,
)
from cv_layout.styles import StyleProfile

logger = logging.getLogger(__name__)

MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
          "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]

DEGREE_CLASSES = {
    "first": "First Class",
    "upperSecond": "Second Class Upper",
    "lowerSecond": "Second Class Lower",
    "third": "Third Class",
    "pass": "Pass",
    "other": "Other",
}

PLACEHOLDER_NAME = "Your Name"
BULLET = "•"

# Vertical gaps (mm) shared by every style.
HEADING_GAP = 1.0
SUBLINE_GAP = 1.0
WORK_SUBLINE_GAP = 3.0
BODY_GAP = 2.0
DATE_GUTTER = 4.0
BULLET_OFFSET = 3.0

_YEAR_MONTH = re.compile(r"^(\d{4})-(\d{1,2})(?:-\d{1,2})?$")


# --- Text helpers -----------------------------------------------------------

def format_date(raw: str) -> str:
    """
    Formats a year-month string for display.

    "2021-03" -> "Mar 2021". A month outside 1-12 degrades to the year alone,
    and anything that is not year-month shaped is shown as given.
    """
    value = (raw or "").strip()
    if not value:
        return ""
    match = _YEAR_MONTH.match(value)
    if not match:
        return value
    year, month = match.group(1), int(match.group(2))
    if 1 <= month <= 12:
        return f"{MONTHS[month - 1]} {year}"
    return year


def format_date_range(start: str, end: str, current: bool = False) -> str:
    """Joins formatted bounds with " - ". Current entries always end in "Present"."""
    start_text = format_date(start)
    end_text = "Present" if current else format_date(end)
    return " - ".join(part for part in (start_text, end_text) if part)


def class_of_degree_label(value: str) -> str:
    return DEGREE_CLASSES.get(value, value)


def group_skills(skills: Sequence[Skill]) -> "OrderedDict[str, List[str]]":
    """Groups skill names by category in first-appearance order; uncategorised last."""
    groups: "OrderedDict[str, List[str]]" = OrderedDict()
    other: List[str] = []
    for skill in skills:
        if skill.category:
            groups.setdefault(skill.category, []).append(skill.name)
        else:
            other.append(skill.name)
    if other:
        groups["Other"] = other
    return groups


def join_fitting(items: Sequence[str], separator: str, family: str, size: float,
                 max_width: float, weight: str = "normal",
                 first_line_width: Optional[float] = None) -> List[str]:
    """Packs whole items onto lines joined by ``separator``; items are never split."""
    items = [i for i in items if i]
    if not items:
        return []
    limit = first_line_width if first_line_width is not None else max_width
    lines: List[str] = []
    current = items[0]
    for item in items[1:]:
        candidate = f"{current}{separator}{item}"
        if text_width(candidate, family, size, weight) <= limit:
            current = candidate
        else:
            lines.append(current + separator.rstrip())
            limit = max_width
            current = item
    lines.append(current)
    return lines


def _href(value: str) -> str:
    if not value or "://" in value or value.startswith("mailto:"):
        return value
    return f"https://{value}"


def _lh(profile: StyleProfile, size: float) -> float:
    return line_height(size, profile.line_height)


# --- Drawing helpers --------------------------------------------------------

def write_section_header(cursor: PageCursor, profile: StyleProfile, section: str,
                         first_block: Optional[float] = None):
    """
    Uppercased title with a full-width rule.

    The title is kept on the same page as ``first_block`` mm of content
    (the first entry's grouped lines); one body line when not given.
    """
    size = profile.fonts.section_header
    lh = _lh(profile, size)
    if first_block is None:
        first_block = _lh(profile, profile.fonts.body)
    cursor.ensure_space(profile.section_spacing + lh + profile.header_gap + first_block)
    cursor.advance(profile.section_spacing)

    title = profile.title_for(section).upper()
    font = font_name(profile.font_family, "bold")
    left, right = cursor.content_left, cursor.content_right

    if profile.rule_position == "above":
        cursor.rule(left, right, offset=profile.rule_offset, width=profile.rule_width, color=profile.colors.rule)
        cursor.write(title, left, font, size, profile.colors.heading)
        cursor.advance(lh + profile.header_gap)
    elif profile.rule_position == "below":
        cursor.write(title, left, font, size, profile.colors.heading)
        cursor.advance(lh)
        cursor.rule(left, right, offset=profile.rule_offset, width=profile.rule_width, color=profile.colors.rule)
        cursor.advance(profile.header_gap)
    else:
        cursor.write(title, left, font, size, profile.colors.heading)
        cursor.advance(lh + profile.header_gap)


def write_paragraph(cursor: PageCursor, profile: StyleProfile, text: str,
                    x: Optional[float] = None, width: Optional[float] = None,
                    size: Optional[float] = None, weight: str = "normal",
                    color: Optional[str] = None) -> int:
    """Wraps and writes free text, checking space line by line. Returns lines written."""
    x = cursor.content_left if x is None else x
    width = cursor.content_right - x if width is None else width
    size = profile.fonts.body if size is None else size
    color = profile.colors.text if color is None else color

    lines = wrap_text(text, profile.font_family, size, width, weight)
    lh = _lh(profile, size)
    font = font_name(profile.font_family, weight)
    for line in lines:
        cursor.ensure_space(lh)
        cursor.write(line, x, font, size, color)
        cursor.advance(lh)
    return len(lines)


def write_labeled_text(cursor: PageCursor, profile: StyleProfile, label: str,
                       lines: List[str], size: float, label_width: float,
                       color: Optional[str] = None, link: str = ""):
    """Bold label followed by pre-wrapped value lines; continuation lines start at the margin."""
    if not lines:
        return
    color = profile.colors.text if color is None else color
    left = cursor.content_left
    lh = _lh(profile, size)
    regular = font_name(profile.font_family)
    for index, line in enumerate(lines):
        cursor.ensure_space(lh)
        if index == 0:
            cursor.write(label, left, font_name(profile.font_family, "bold"), size, profile.colors.text)
            cursor.write(line, left + label_width, regular, size, color, link=link)
        else:
            cursor.write(line, left, regular, size, color, link=link)
        cursor.advance(lh)


def _label_width(profile: StyleProfile, label: str, size: float) -> float:
    return text_width(f"{label} ", profile.font_family, size, "bold")


def _labeled_lines(cursor: PageCursor, profile: StyleProfile, label: str,
                   value: str, size: float) -> List[str]:
    width = cursor.content_width
    return wrap_text(value, profile.font_family, size, width,
                     first_line_width=width - _label_width(profile, label, size))


def _labeled_items(cursor: PageCursor, profile: StyleProfile, label: str,
                   items: Sequence[str], separator: str, size: float) -> List[str]:
    width = cursor.content_width
    return join_fitting(items, separator, profile.font_family, size, width,
                        first_line_width=width - _label_width(profile, label, size))


def write_bullet(cursor: PageCursor, profile: StyleProfile, text: str):
    """Bullet glyph with a hanging indent; each wrapped line checks space on its own."""
    size = profile.fonts.body
    lh = _lh(profile, size)
    left = cursor.content_left
    indent = profile.bullet_indent
    lines = wrap_text(text, profile.font_family, size, cursor.content_width - indent)
    font = font_name(profile.font_family)
    for index, line in enumerate(lines):
        cursor.ensure_space(lh)
        if index == 0:
            cursor.write(BULLET, left + BULLET_OFFSET, font, size, profile.colors.text)
        cursor.write(line, left + indent, font, size, profile.colors.text)
        cursor.advance(lh)


def _heading_lines(cursor: PageCursor, profile: StyleProfile, title: str, date_text: str) -> List[str]:
    size = profile.fonts.body
    width = cursor.content_width
    first = width
    if date_text:
        first = width - text_width(date_text, profile.font_family, profile.fonts.small) - DATE_GUTTER
    return wrap_text(title, profile.font_family, size, width, "bold", first_line_width=first)


def write_entry_heading(cursor: PageCursor, profile: StyleProfile, lines: List[str], date_text: str):
    """Bold title left, date right-aligned on the first baseline."""
    size = profile.fonts.body
    lh = _lh(profile, size)
    bold = font_name(profile.font_family, "bold")
    if not lines and date_text:
        lines = [""]
    for index, line in enumerate(lines):
        if index > 0:
            cursor.ensure_space(lh)
        if line:
            cursor.write(line, cursor.content_left, bold, size, profile.colors.heading)
        if index == 0 and date_text:
            cursor.write(date_text, cursor.content_right, font_name(profile.font_family),
                         profile.fonts.small, profile.colors.muted, align="right")
        cursor.advance(lh)
    if lines:
        cursor.advance(HEADING_GAP)


def _heading_height(profile: StyleProfile, lines: List[str], date_text: str) -> float:
    count = len(lines) or (1 if date_text else 0)
    if not count:
        return 0.0
    return count * _lh(profile, profile.fonts.body) + HEADING_GAP


def write_subline(cursor: PageCursor, profile: StyleProfile, text: str, gap: float = SUBLINE_GAP):
    if not text:
        return
    write_paragraph(cursor, profile, text)
    cursor.advance(gap)


def _subline_height(cursor: PageCursor, profile: StyleProfile, text: str, gap: float = SUBLINE_GAP) -> float:
    if not text:
        return 0.0
    lines = wrap_text(text, profile.font_family, profile.fonts.body, cursor.content_width)
    return len(lines) * _lh(profile, profile.fonts.body) + gap


class EntryPlan(NamedTuple):
    """An entry's heading block, measured before anything is written."""
    heading: List[str]
    date_text: str
    subline: str
    subline_gap: float
    height: float


def _plan_entry(cursor: PageCursor, profile: StyleProfile, title: str, date_text: str,
                subline: str = "", subline_gap: float = SUBLINE_GAP, body_height: float = 0.0) -> EntryPlan:
    """Wraps the heading and totals the height that must stay on one page with it."""
    heading = _heading_lines(cursor, profile, title, date_text)
    height = (_heading_height(profile, heading, date_text)
              + _subline_height(cursor, profile, subline, subline_gap)
              + body_height)
    return EntryPlan(heading, date_text, subline, subline_gap, height)


def _write_planned_entry(cursor: PageCursor, profile: StyleProfile, plan: EntryPlan):
    cursor.ensure_space(plan.height)
    write_entry_heading(cursor, profile, plan.heading, plan.date_text)
    write_subline(cursor, profile, plan.subline, plan.subline_gap)


# --- Section formatters -----------------------------------------------------

def _contact_lines(cursor: PageCursor, profile: StyleProfile, items: List[str]) -> List[str]:
    return join_fitting(items, " | ", profile.contact_font_family, profile.fonts.contact, cursor.content_width)


def format_header(cursor: PageCursor, profile: StyleProfile, info: PersonalInfo):
    """Name, job title and contact block. Always rendered, even when empty."""
    center = profile.header_align == "center"
    x = cursor.page_width / 2 if center else cursor.content_left
    align = "center" if center else "left"
    family = profile.font_family

    name_size = profile.fonts.name
    cursor.ensure_space(_lh(profile, name_size))
    cursor.write(info.full_name or PLACEHOLDER_NAME, x, font_name(family, "bold"), name_size,
                 profile.colors.heading, align=align)
    cursor.advance(_lh(profile, name_size) + 2)

    if info.job_title:
        title_size = profile.fonts.title
        cursor.ensure_space(_lh(profile, title_size))
        cursor.write(info.job_title, x, font_name(family), title_size, profile.colors.muted, align=align)
        cursor.advance(_lh(profile, title_size) + 4)

    contact_size = profile.fonts.contact
    contact_font = font_name(profile.contact_font_family)
    clh = _lh(profile, contact_size)
    details, links = info.contact_details(), info.social_links()
    if not details and not links:
        return

    if profile.contact_layout == "columns":
        left_items = [(label, value, "") for label, value in (("Email", info.email), ("Phone", info.phone)) if value]
        right_items = [("Location", info.location, "")] if info.location else []
        right_items.extend((label, value, _href(value)) for label, value in (
            ("LinkedIn", info.linkedin), ("GitHub", info.github),
            ("Website", info.website), ("Portfolio", info.portfolio)) if value)
        right_x = cursor.page_width / 2 + 10
        for row in range(max(len(left_items), len(right_items))):
            cursor.ensure_space(clh)
            for column_x, items in ((cursor.content_left, left_items), (right_x, right_items)):
                if row < len(items):
                    label, value, link = items[row]
                    color = profile.colors.link if link else profile.colors.text
                    cursor.write(f"{label}: {value}", column_x, contact_font, contact_size, color, link=link)
            cursor.advance(clh)
    elif profile.contact_layout == "stacked":
        for item in details:
            cursor.ensure_space(clh)
            cursor.write(item, x, contact_font, contact_size, profile.colors.text, align=align)
            cursor.advance(clh)
        for item in links:
            cursor.ensure_space(clh)
            cursor.write(item, x, contact_font, contact_size, profile.colors.link, align=align, link=_href(item))
            cursor.advance(clh)
    else:
        for line in _contact_lines(cursor, profile, details):
            cursor.ensure_space(clh)
            cursor.write(line, x, contact_font, contact_size, profile.colors.text, align=align)
            cursor.advance(clh)
        for line in _contact_lines(cursor, profile, links):
            cursor.ensure_space(clh)
            link = _href(line) if line in links else ""
            cursor.write(line, x, contact_font, contact_size, profile.colors.link, align=align, link=link)
            cursor.advance(clh)
    cursor.advance(profile.contact_gap)


def format_summary(cursor: PageCursor, profile: StyleProfile, info: PersonalInfo):
    if not info.summary:
        logger.debug("Skipping summary: empty")
        return
    write_section_header(cursor, profile, "summary")
    write_paragraph(cursor, profile, info.summary)
    cursor.advance(4)


def format_work_experience(cursor: PageCursor, profile: StyleProfile, entries: Sequence[WorkExperience]):
    if not entries:
        logger.debug("Skipping work experience: empty")
        return
    body_lh = _lh(profile, profile.fonts.body)

    plans = []
    for job in entries:
        date_text = format_date_range(job.start_date, job.end_date, job.is_current_job)
        subline = " | ".join(p for p in ((job.company if job.position else ""), job.location) if p)
        has_body = bool(job.description or job.bullet_points)
        plans.append(_plan_entry(cursor, profile, job.position or job.company, date_text, subline,
                                 WORK_SUBLINE_GAP, body_lh if has_body else 0.0))

    write_section_header(cursor, profile, "work", first_block=plans[0].height)
    for index, (job, plan) in enumerate(zip(entries, plans)):
        _write_planned_entry(cursor, profile, plan)

        if job.description:
            write_paragraph(cursor, profile, job.description)
            cursor.advance(BODY_GAP)

        for bullet in job.bullet_points:
            write_bullet(cursor, profile, bullet.text)
            cursor.advance(BODY_GAP)

        if index < len(entries) - 1:
            cursor.advance(profile.work_entry_spacing)


def format_education(cursor: PageCursor, profile: StyleProfile, entries: Sequence[Education]):
    if not entries:
        logger.debug("Skipping education: empty")
        return
    small = profile.fonts.small

    plans = []
    for edu in entries:
        degree = edu.degree
        if degree and edu.field_of_study:
            degree = f"{degree} in {edu.field_of_study}"
        title = degree or edu.field_of_study or edu.institution
        subline = " | ".join(p for p in ((edu.institution if title != edu.institution else ""), edu.location) if p)
        plans.append(_plan_entry(cursor, profile, title, format_date_range(edu.start_date, edu.end_date), subline))

    write_section_header(cursor, profile, "education", first_block=plans[0].height)
    for index, (edu, plan) in enumerate(zip(entries, plans)):
        _write_planned_entry(cursor, profile, plan)

        if edu.class_of_degree:
            write_paragraph(cursor, profile, class_of_degree_label(edu.class_of_degree), size=small)
            cursor.advance(SUBLINE_GAP)
        if edu.gpa:
            write_paragraph(cursor, profile, f"GPA: {edu.gpa}", size=small)
            cursor.advance(SUBLINE_GAP)
        if edu.description:
            write_paragraph(cursor, profile, edu.description)

        if index < len(entries) - 1:
            cursor.advance(profile.entry_spacing)


def format_skills(cursor: PageCursor, profile: StyleProfile, skills: Sequence[Skill]):
    if not skills:
        logger.debug("Skipping skills: empty")
        return
    write_section_header(cursor, profile, "skills")
    size = profile.fonts.body
    separator = profile.skills_separator

    if profile.group_skills_by_category and any(s.category for s in skills):
        for category, names in group_skills(skills).items():
            label = f"{category}:"
            lines = _labeled_items(cursor, profile, label, names, separator, size)
            write_labeled_text(cursor, profile, label, lines, size, _label_width(profile, label, size))
            cursor.advance(SUBLINE_GAP)
    else:
        lh = _lh(profile, size)
        font = font_name(profile.font_family)
        lines = join_fitting([s.name for s in skills], separator, profile.font_family, size, cursor.content_width)
        for line in lines:
            cursor.ensure_space(lh)
            cursor.write(line, cursor.content_left, font, size, profile.colors.text)
            cursor.advance(lh)
    cursor.advance(BODY_GAP)


def format_projects(cursor: PageCursor, profile: StyleProfile, projects: Sequence[Project]):
    if not projects:
        logger.debug("Skipping projects: empty")
        return
    small = profile.fonts.small
    small_lh = _lh(profile, small)
    tech_label = "Technologies:"

    plans, tech = [], []
    for project in projects:
        tech_lines = _labeled_items(cursor, profile, tech_label, project.technologies, ", ", small)
        tech.append(tech_lines)
        plans.append(_plan_entry(cursor, profile, project.name,
                                 format_date_range(project.start_date, project.end_date),
                                 body_height=small_lh if tech_lines else 0.0))

    write_section_header(cursor, profile, "projects", first_block=plans[0].height)
    for index, (project, plan, tech_lines) in enumerate(zip(projects, plans, tech)):
        _write_planned_entry(cursor, profile, plan)
        cursor.advance(1)

        if tech_lines:
            write_labeled_text(cursor, profile, tech_label, tech_lines, small,
                               _label_width(profile, tech_label, small))
            cursor.advance(BODY_GAP)

        if project.description:
            write_paragraph(cursor, profile, project.description)
            cursor.advance(BODY_GAP)

        if project.url:
            link_label = "Link:"
            write_labeled_text(cursor, profile, link_label,
                               _labeled_lines(cursor, profile, link_label, project.url, small),
                               small, _label_width(profile, link_label, small),
                               color=profile.colors.link, link=_href(project.url))
            cursor.advance(BODY_GAP)

        if index < len(projects) - 1:
            cursor.advance(profile.entry_spacing)


def format_certifications(cursor: PageCursor, profile: StyleProfile, certifications: Sequence[Certification]):
    if not certifications:
        logger.debug("Skipping certifications: empty")
        return
    small = profile.fonts.small

    plans = []
    for cert in certifications:
        date_text = format_date(cert.date)
        if cert.expiry_date and date_text:
            date_text = format_date_range(cert.date, cert.expiry_date)
        plans.append(_plan_entry(cursor, profile, cert.name, date_text, cert.issuer, 0.0))

    write_section_header(cursor, profile, "certifications", first_block=plans[0].height)
    for index, (cert, plan) in enumerate(zip(certifications, plans)):
        _write_planned_entry(cursor, profile, plan)

        if cert.credential_id:
            write_paragraph(cursor, profile, f"Credential ID: {cert.credential_id}", size=small)
        if cert.credential_url:
            label = "Verify:"
            write_labeled_text(cursor, profile, label,
                               _labeled_lines(cursor, profile, label, cert.credential_url, small),
                               small, _label_width(profile, label, small),
                               color=profile.colors.link, link=_href(cert.credential_url))

        if index < len(certifications) - 1:
            cursor.advance(profile.entry_spacing)


def format_extracurricular(cursor: PageCursor, profile: StyleProfile, activities: Sequence[Extracurricular]):
    if not activities:
        logger.debug("Skipping extracurricular: empty")
        return
    body_lh = _lh(profile, profile.fonts.body)

    plans = []
    for activity in activities:
        date_text = format_date_range(activity.start_date, activity.end_date, activity.is_ongoing)
        plans.append(_plan_entry(cursor, profile, activity.title or activity.organization, date_text,
                                 activity.organization if activity.title else "",
                                 body_height=body_lh if activity.description else 0.0))

    write_section_header(cursor, profile, "extracurricular", first_block=plans[0].height)
    for index, (activity, plan) in enumerate(zip(activities, plans)):
        _write_planned_entry(cursor, profile, plan)

        if activity.description:
            write_paragraph(cursor, profile, activity.description)

        if index < len(activities) - 1:
            cursor.advance(profile.entry_spacing)


SECTION_ORDER = (
    "summary", "work", "education", "skills",
    "projects", "certifications", "extracurricular",
)

FORMATTERS: Dict[str, Callable] = {
    "summary": format_summary,
    "work": format_work_experience,
    "education": format_education,
    "skills": format_skills,
    "projects": format_projects,
    "certifications": format_certifications,
    "extracurricular": format_extracurricular,
}
