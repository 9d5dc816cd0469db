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
Renders a sample CV in every style so the profiles can be compared side by side.

    python scripts/sample_cv.py [output_dir]
"""

import os
import sys

sys.path.append(os.path.join(os.getcwd(), 'src'))

from cv_layout.exporters import export_text
from cv_layout.generator import CVGenerator
from cv_layout.models import CVData
from cv_layout.styles import available_styles

SAMPLE = {
    "personalInfo": {
        "fullName": "Sample Person",
        "jobTitle": "Engineering Lead",
        "email": "sample@example.com",
        "phone": "+44 20 7946 0000",
        "location": "London, UK",
        "linkedin": "linkedin.com/in/sample",
        "github": "github.com/sample",
        "summary": "Engineering lead with a background in platform teams, build tooling and "
                   "developer experience. Comfortable owning delivery from design to on-call.",
    },
    "workExperience": [
        {
            "company": "Example Ltd",
            "position": "Engineering Lead",
            "location": "London",
            "startDate": "2021-04",
            "isCurrentJob": True,
            "bulletPoints": [
                "Led a team of eight engineers across build, release and observability.",
                "Cut median CI time from 40 to 12 minutes by introducing remote caching.",
            ],
        },
        {
            "company": "Sample Co",
            "position": "Senior Engineer",
            "startDate": "2017-01",
            "endDate": "2021-03",
            "description": "Platform team for a payments product.",
            "bulletPoints": ["Migrated 120 services to Kubernetes with no customer-facing downtime."],
        },
    ],
    "education": [
        {"institution": "University of Somewhere", "degree": "BSc", "fieldOfStudy": "Computer Science",
         "classOfDegree": "first", "startDate": "2010-09", "endDate": "2013-06"},
    ],
    "skills": [
        {"name": "Python", "category": "Languages"}, {"name": "Go", "category": "Languages"},
        {"name": "Kubernetes", "category": "Platforms"}, {"name": "Terraform", "category": "Platforms"},
        {"name": "Mentoring"},
    ],
    "projects": [
        {"name": "buildcache", "technologies": "Go, gRPC", "url": "github.com/sample/buildcache",
         "description": "Content-addressed remote cache for CI builds."},
    ],
    "certifications": [
        {"name": "Certified Kubernetes Administrator", "issuer": "CNCF", "date": "2020-05",
         "expiryDate": "2023-05", "credentialId": "CKA-0000"},
    ],
}

def main(output_dir="user_content/generated_cvs/samples"):
    os.makedirs(output_dir, exist_ok=True)
    cv = CVData.from_dict(SAMPLE)
    generator = CVGenerator()
    for profile in available_styles():
        path = generator.save(cv, output_dir=output_dir, style_id=profile.key)
        print(f"{profile.key:<14} -> {path}")
    text_path = os.path.join(output_dir, "Sample_Person_CV.txt")
    with open(text_path, 'w', encoding='utf-8') as f:
        f.write(export_text(cv))
    print(f"{'text':<14} -> {text_path}")

if __name__ == "__main__":
    main(*sys.argv[1:2])
