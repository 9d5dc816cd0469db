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
Data models for the CV layout engine.

The form layer hands us camelCase JSON where almost every field is optional
and a few are loosely typed (technologies as a list or a comma string,
bullets as objects or plain strings). All of that is resolved once, in the
``from_dict`` constructors below, so the formatters only ever see the shapes
declared here.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


def _text(value: Any) -> str:
    """Coerces an optional scalar to a stripped string ('' for None)."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    return str(value).strip()


def _first(data: Dict[str, Any], *keys: str) -> str:
    """Returns the first non-empty string among the given keys."""
    for key in keys:
        value = _text(data.get(key))
        if value:
            return value
    return ""


def _flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes")
    return bool(value)


def _items(value: Any) -> List[Any]:
    if isinstance(value, list):
        return value
    return []


@dataclass
class PersonalInfo:
    """Name, headline and contact details shown in the document header."""
    full_name: str = ""
    job_title: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    website: str = ""
    linkedin: str = ""
    github: str = ""
    portfolio: str = ""
    summary: str = ""

    def contact_details(self) -> List[str]:
        return [v for v in (self.email, self.phone, self.location) if v]

    def social_links(self) -> List[str]:
        return [v for v in (self.linkedin, self.github, self.website, self.portfolio) if v]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PersonalInfo":
        return cls(
            full_name=_first(data, "fullName", "name"),
            job_title=_first(data, "jobTitle", "title"),
            email=_text(data.get("email")),
            phone=_text(data.get("phone")),
            location=_text(data.get("location")),
            website=_text(data.get("website")),
            linkedin=_text(data.get("linkedin")),
            github=_text(data.get("github")),
            portfolio=_text(data.get("portfolio")),
            summary=_text(data.get("summary")),
        )


@dataclass
class BulletPoint:
    """A single achievement/responsibility line under a role."""
    id: str
    text: str

    @classmethod
    def from_value(cls, value: Any, index: int) -> Optional["BulletPoint"]:
        if isinstance(value, dict):
            text = _text(value.get("text"))
            bullet_id = _text(value.get("id")) or str(index)
        else:
            text = _text(value)
            bullet_id = str(index)
        if not text:
            return None
        return cls(id=bullet_id, text=text)


@dataclass
class WorkExperience:
    """Represents a single professional experience entry."""
    company: str
    position: str
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    is_current_job: bool = False
    description: str = ""
    bullet_points: List[BulletPoint] = field(default_factory=list)
    id: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WorkExperience":
        bullets = []
        for index, raw in enumerate(_items(data.get("bulletPoints"))):
            bullet = BulletPoint.from_value(raw, index)
            if bullet:
                bullets.append(bullet)
        return cls(
            company=_text(data.get("company")),
            position=_first(data, "position", "jobTitle"),
            location=_text(data.get("location")),
            start_date=_text(data.get("startDate")),
            end_date=_text(data.get("endDate")),
            is_current_job=_flag(data.get("isCurrentJob")),
            description=_text(data.get("description")),
            bullet_points=bullets,
            id=_text(data.get("id")),
        )


@dataclass
class Education:
    """Represents a degree or other qualification."""
    institution: str
    degree: str
    field_of_study: str = ""
    class_of_degree: str = ""
    start_date: str = ""
    end_date: str = ""
    gpa: str = ""
    description: str = ""
    location: str = ""
    id: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Education":
        return cls(
            institution=_text(data.get("institution")),
            degree=_text(data.get("degree")),
            field_of_study=_text(data.get("fieldOfStudy")),
            class_of_degree=_text(data.get("classOfDegree")),
            start_date=_text(data.get("startDate")),
            end_date=_text(data.get("endDate")),
            gpa=_text(data.get("gpa")),
            description=_text(data.get("description")),
            location=_text(data.get("location")),
            id=_text(data.get("id")),
        )


@dataclass
class Skill:
    """A named skill with optional proficiency (1-5) and grouping label."""
    name: str
    level: Optional[int] = None
    category: str = ""
    id: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Skill":
        level = data.get("level")
        try:
            level = int(level) if level is not None and level != "" else None
        except (TypeError, ValueError):
            level = None
        if level is not None and not 1 <= level <= 5:
            level = None
        return cls(
            name=_text(data.get("name")),
            level=level,
            category=_text(data.get("category")),
            id=_text(data.get("id")),
        )


@dataclass
class Project:
    """Represents a technical project or open source contribution."""
    name: str
    description: str = ""
    technologies: List[str] = field(default_factory=list)
    url: str = ""
    start_date: str = ""
    end_date: str = ""
    id: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Project":
        raw = data.get("technologies")
        if isinstance(raw, str):
            raw = raw.split(",")
        technologies = [t for t in (_text(v) for v in _items(raw)) if t]
        return cls(
            name=_text(data.get("name")),
            description=_text(data.get("description")),
            technologies=technologies,
            url=_first(data, "url", "link"),
            start_date=_text(data.get("startDate")),
            end_date=_text(data.get("endDate")),
            id=_text(data.get("id")),
        )


@dataclass
class Certification:
    name: str
    issuer: str = ""
    date: str = ""
    expiry_date: str = ""
    credential_id: str = ""
    credential_url: str = ""
    id: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Certification":
        return cls(
            name=_text(data.get("name")),
            issuer=_first(data, "issuer", "organization"),
            date=_text(data.get("date")),
            expiry_date=_text(data.get("expiryDate")),
            credential_id=_text(data.get("credentialId")),
            credential_url=_first(data, "credentialUrl", "url"),
            id=_text(data.get("id")),
        )


@dataclass
class Extracurricular:
    title: str
    organization: str = ""
    start_date: str = ""
    end_date: str = ""
    is_ongoing: bool = False
    description: str = ""
    id: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Extracurricular":
        return cls(
            title=_first(data, "title", "name", "activity", "role"),
            organization=_text(data.get("organization")),
            start_date=_text(data.get("startDate")),
            end_date=_text(data.get("endDate")),
            is_ongoing=_flag(data.get("isOngoing")),
            description=_text(data.get("description")),
            id=_text(data.get("id")),
        )


@dataclass
class CVData:
    """
    Structured data representing a complete CV.
    This is the data object the layout engine turns into a paginated PDF.
    List order is display order; nothing downstream re-sorts it.
    """
    personal_info: PersonalInfo = field(default_factory=PersonalInfo)
    education: List[Education] = field(default_factory=list)
    work_experience: List[WorkExperience] = field(default_factory=list)
    skills: List[Skill] = field(default_factory=list)
    projects: List[Project] = field(default_factory=list)
    certifications: List[Certification] = field(default_factory=list)
    extracurricular: List[Extracurricular] = field(default_factory=list)
    template_id: str = "classic"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CVData":
        """Builds a CV from the form layer's camelCase JSON."""
        personal = data.get("personalInfo")
        return cls(
            personal_info=PersonalInfo.from_dict(personal if isinstance(personal, dict) else {}),
            education=[Education.from_dict(e) for e in _items(data.get("education")) if isinstance(e, dict)],
            work_experience=[WorkExperience.from_dict(w) for w in _items(data.get("workExperience")) if isinstance(w, dict)],
            skills=[s for s in (Skill.from_dict(s) for s in _items(data.get("skills")) if isinstance(s, dict)) if s.name],
            projects=[Project.from_dict(p) for p in _items(data.get("projects")) if isinstance(p, dict)],
            certifications=[Certification.from_dict(c) for c in _items(data.get("certifications")) if isinstance(c, dict)],
            extracurricular=[Extracurricular.from_dict(x) for x in _items(data.get("extracurricular")) if isinstance(x, dict)],
            template_id=_text(data.get("templateId")) or "classic",
        )

    def to_dict(self) -> Dict[str, Any]:
        """Inverse of ``from_dict`` (camelCase keys)."""
        p = self.personal_info
        return {
            "personalInfo": {
                "fullName": p.full_name, "jobTitle": p.job_title, "email": p.email,
                "phone": p.phone, "location": p.location, "website": p.website,
                "linkedin": p.linkedin, "github": p.github, "portfolio": p.portfolio,
                "summary": p.summary,
            },
            "education": [
                {"id": e.id, "institution": e.institution, "degree": e.degree,
                 "fieldOfStudy": e.field_of_study, "classOfDegree": e.class_of_degree,
                 "startDate": e.start_date, "endDate": e.end_date, "gpa": e.gpa,
                 "description": e.description, "location": e.location}
                for e in self.education
            ],
            "workExperience": [
                {"id": w.id, "company": w.company, "position": w.position,
                 "location": w.location, "startDate": w.start_date, "endDate": w.end_date,
                 "isCurrentJob": w.is_current_job, "description": w.description,
                 "bulletPoints": [{"id": b.id, "text": b.text} for b in w.bullet_points]}
                for w in self.work_experience
            ],
            "skills": [
                {"id": s.id, "name": s.name, "level": s.level, "category": s.category}
                for s in self.skills
            ],
            "projects": [
                {"id": pr.id, "name": pr.name, "description": pr.description,
                 "technologies": list(pr.technologies), "url": pr.url,
                 "startDate": pr.start_date, "endDate": pr.end_date}
                for pr in self.projects
            ],
            "certifications": [
                {"id": c.id, "name": c.name, "issuer": c.issuer, "date": c.date,
                 "expiryDate": c.expiry_date, "credentialId": c.credential_id,
                 "credentialUrl": c.credential_url}
                for c in self.certifications
            ],
            "extracurricular": [
                {"id": x.id, "title": x.title, "organization": x.organization,
                 "startDate": x.start_date, "endDate": x.end_date,
                 "isOngoing": x.is_ongoing, "description": x.description}
                for x in self.extracurricular
            ],
            "templateId": self.template_id,
        }
