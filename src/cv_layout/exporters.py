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
Non-PDF exports: ATS plain text and an editable DOCX.

Both omit empty sections like the PDF does; neither paginates. The plain
text leads with the skills block, the DOCX keeps the PDF section order.
"""

import logging
from pathlib import Path
from typing import List, Union

from docx import Document
from docx.shared import Pt

from cv_layout.formatters import (
    class_of_degree_label,
    format_date,
    format_date_range,
    group_skills,
)
from cv_layout.models import CVData

logger = logging.getLogger(__name__)


def _rule(char: str, length: int) -> str:
    return char * length


def _section(lines: List[str], title: str):
    lines.append(title)
    lines.append(_rule("-", len(title)))


def export_text(cv: CVData) -> str:
    """Plain-text CV for pasting into applicant tracking systems."""
    p = cv.personal_info
    lines: List[str] = [(p.full_name or "Your Name").upper()]
    if p.job_title:
        lines.append(p.job_title.upper())
    lines.append(_rule("=", 60))
    lines.append("")

    contact = [
        ("Email", p.email), ("Phone", p.phone), ("Location", p.location),
        ("LinkedIn", p.linkedin), ("Website", p.website), ("GitHub", p.github),
        ("Portfolio", p.portfolio),
    ]
    contact = [(label, value) for label, value in contact if value]
    if contact:
        _section(lines, "CONTACT INFORMATION")
        lines.extend(f"{label}: {value}" for label, value in contact)
        lines.append("")

    if p.summary:
        _section(lines, "PROFESSIONAL SUMMARY")
        lines.extend([p.summary, ""])

    if cv.skills:
        _section(lines, "CORE COMPETENCIES")
        for category, names in group_skills(cv.skills).items():
            lines.append(f"{category.upper()}: {' • '.join(names)}")
        lines.append("")

    if cv.work_experience:
        _section(lines, "PROFESSIONAL EXPERIENCE")
        for index, job in enumerate(cv.work_experience):
            lines.append((job.position or job.company).upper())
            company = " | ".join(v for v in ((job.company if job.position else ""), job.location) if v)
            if company:
                lines.append(company)
            dates = format_date_range(job.start_date, job.end_date, job.is_current_job)
            if dates:
                lines.append(dates)
            if job.description:
                lines.append(job.description)
            lines.extend(f"• {b.text}" for b in job.bullet_points)
            lines.append("")
            if index < len(cv.work_experience) - 1:
                lines.append(_rule("-", 40))

    if cv.education:
        _section(lines, "EDUCATION")
        for edu in cv.education:
            degree = edu.degree.upper()
            if edu.field_of_study:
                degree = f"{degree} IN {edu.field_of_study.upper()}" if degree else edu.field_of_study.upper()
            if degree:
                lines.append(degree)
            if edu.institution:
                lines.append(edu.institution)
            dates = format_date_range(edu.start_date, edu.end_date)
            if dates:
                lines.append(dates)
            if edu.class_of_degree:
                lines.append(class_of_degree_label(edu.class_of_degree))
            if edu.gpa:
                lines.append(f"GPA: {edu.gpa}")
            if edu.description:
                lines.append(edu.description)
            lines.append("")

    if cv.projects:
        _section(lines, "KEY PROJECTS")
        for project in cv.projects:
            lines.append(project.name.upper())
            if project.url:
                lines.append(project.url)
            if project.description:
                lines.append(project.description)
            if project.technologies:
                lines.append(f"Technologies: {', '.join(project.technologies)}")
            lines.append("")

    if cv.certifications:
        _section(lines, "CERTIFICATIONS")
        for cert in cv.certifications:
            lines.append(cert.name.upper())
            issuer = " | ".join(v for v in (cert.issuer, format_date(cert.date)) if v)
            if issuer:
                lines.append(issuer)
            if cert.credential_id:
                lines.append(f"Credential ID: {cert.credential_id}")
            lines.append("")

    if cv.extracurricular:
        _section(lines, "EXTRACURRICULAR ACTIVITIES")
        for activity in cv.extracurricular:
            lines.append((activity.title or activity.organization).upper())
            if activity.title and activity.organization:
                lines.append(activity.organization)
            dates = format_date_range(activity.start_date, activity.end_date, activity.is_ongoing)
            if dates:
                lines.append(dates)
            if activity.description:
                lines.append(activity.description)
            lines.append("")

    return "\n".join(lines).rstrip() + "\n"


def export_docx(cv: CVData, output_path: Union[str, Path]) -> Path:
    """
    Writes an editable DOCX version of the CV.

    Headings are kept with the following paragraph and body paragraphs use
    widow control so Word paginates sensibly on its own.
    """
    document = Document()
    try:
        style = document.styles['Normal']
        style.font.name = 'Calibri'
        style.font.size = Pt(11)
    except KeyError:
        logger.warning("Default DOCX template has no 'Normal' style; keeping Word defaults")

    p = cv.personal_info

    def heading(title: str):
        para = document.add_paragraph(title.upper(), style='Heading 1')
        para.paragraph_format.keep_with_next = True

    def entry_line(title: str, dates: str):
        para = document.add_paragraph()
        para.add_run(title).bold = True
        if dates:
            para.add_run(f" | {dates}").italic = True
        para.paragraph_format.keep_with_next = True

    def body(text: str):
        para = document.add_paragraph(text)
        para.paragraph_format.widow_control = True

    def bullet(text: str):
        para = document.add_paragraph(text, style='List Bullet')
        para.paragraph_format.widow_control = True

    # --- HEADER ---
    document.add_paragraph(p.full_name or "Your Name", style='Title')
    if p.job_title:
        document.add_paragraph().add_run(p.job_title).bold = True
    details = " | ".join(p.contact_details() + p.social_links())
    if details:
        document.add_paragraph(details)

    if p.summary:
        heading("Professional Summary")
        body(p.summary)

    if cv.work_experience:
        heading("Professional Experience")
        for job in cv.work_experience:
            entry_line(job.position or job.company,
                       format_date_range(job.start_date, job.end_date, job.is_current_job))
            company = " | ".join(v for v in ((job.company if job.position else ""), job.location) if v)
            if company:
                body(company)
            if job.description:
                body(job.description)
            for b in job.bullet_points:
                bullet(b.text)

    if cv.education:
        heading("Education")
        for edu in cv.education:
            degree = f"{edu.degree} in {edu.field_of_study}" if edu.degree and edu.field_of_study else (edu.degree or edu.institution)
            entry_line(degree, format_date_range(edu.start_date, edu.end_date))
            if edu.institution and degree != edu.institution:
                body(edu.institution)
            if edu.class_of_degree:
                body(class_of_degree_label(edu.class_of_degree))
            if edu.description:
                body(edu.description)

    if cv.skills:
        heading("Skills")
        for category, names in group_skills(cv.skills).items():
            para = document.add_paragraph(style='List Bullet')
            para.add_run(f"{category}:").bold = True
            para.add_run(f" {', '.join(names)}")

    if cv.projects:
        heading("Projects")
        for project in cv.projects:
            entry_line(project.name, format_date_range(project.start_date, project.end_date))
            if project.technologies:
                para = document.add_paragraph()
                para.add_run("Technologies: ").bold = True
                para.add_run(", ".join(project.technologies))
            if project.description:
                body(project.description)
            if project.url:
                body(project.url)

    if cv.certifications:
        heading("Certifications")
        for cert in cv.certifications:
            entry_line(cert.name, format_date(cert.date))
            if cert.issuer:
                body(cert.issuer)
            if cert.credential_id:
                body(f"Credential ID: {cert.credential_id}")

    if cv.extracurricular:
        heading("Extracurricular Activities")
        for activity in cv.extracurricular:
            entry_line(activity.title or activity.organization,
                       format_date_range(activity.start_date, activity.end_date, activity.is_ongoing))
            if activity.title and activity.organization:
                body(activity.organization)
            if activity.description:
                body(activity.description)

    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    document.save(str(path))
    logger.info(f"DOCX generated successfully: {path}")
    return path
