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

import unittest

from cv_layout.cursor import LineOp, PageCursor, TextOp
from cv_layout.formatters import (
    BULLET,
    FORMATTERS,
    PLACEHOLDER_NAME,
    class_of_degree_label,
    format_date,
    format_date_range,
    format_header,
    format_skills,
    format_work_experience,
    group_skills,
    join_fitting,
    write_section_header,
)
from cv_layout.measure import text_width
from cv_layout.models import BulletPoint, Extracurricular, PersonalInfo, Skill, WorkExperience
from cv_layout.styles import get_profile

from cv_fixtures import full_cv


def new_cursor(profile):
    return PageCursor(profile.page_width, profile.page_height, profile.margins)


def text_ops(cursor, page=None):
    pages = cursor.pages if page is None else [cursor.pages[page]]
    return [op for ops in pages for op in ops if isinstance(op, TextOp)]


def page_of(cursor, text):
    for index, ops in enumerate(cursor.pages):
        if any(isinstance(op, TextOp) and op.text == text for op in ops):
            return index
    return None


class TestDates(unittest.TestCase):
    def test_format_date(self):
        self.assertEqual(format_date("2019-06"), "Jun 2019")
        self.assertEqual(format_date("2000-01"), "Jan 2000")
        self.assertEqual(format_date("2021-3"), "Mar 2021")
        self.assertEqual(format_date("2021-03-15"), "Mar 2021")

    def test_format_date_empty(self):
        self.assertEqual(format_date(""), "")
        self.assertEqual(format_date(None), "")
        self.assertEqual(format_date("   "), "")

    def test_bad_month_degrades_to_year(self):
        self.assertEqual(format_date("2020-13"), "2020")
        self.assertEqual(format_date("2020-00"), "2020")

    def test_unparseable_passes_through(self):
        self.assertEqual(format_date("Summer 2018"), "Summer 2018")
        self.assertEqual(format_date(" 2018 "), "2018")

    def test_range(self):
        self.assertEqual(format_date_range("2019-06", "2021-01"), "Jun 2019 - Jan 2021")
        self.assertEqual(format_date_range("2019-06", ""), "Jun 2019")
        self.assertEqual(format_date_range("", "2021-01"), "Jan 2021")
        self.assertEqual(format_date_range("", ""), "")

    def test_current_overrides_end(self):
        self.assertEqual(format_date_range("2019-06", "2030-01", current=True), "Jun 2019 - Present")
        self.assertEqual(format_date_range("", "", current=True), "Present")


class TestTextHelpers(unittest.TestCase):
    def test_class_of_degree_label(self):
        self.assertEqual(class_of_degree_label("upperSecond"), "Second Class Upper")
        self.assertEqual(class_of_degree_label("first"), "First Class")
        self.assertEqual(class_of_degree_label("Distinction"), "Distinction")

    def test_group_skills_puts_uncategorised_last(self):
        groups = group_skills([
            Skill(name="Go"), Skill(name="Python", category="Languages"),
            Skill(name="K8s", category="Platforms"), Skill(name="Rust", category="Languages"),
        ])
        self.assertEqual(list(groups), ["Languages", "Platforms", "Other"])
        self.assertEqual(groups["Languages"], ["Python", "Rust"])
        self.assertEqual(groups["Other"], ["Go"])

    def test_join_fitting_never_splits_items(self):
        items = [f"Skill number {i}" for i in range(30)]
        lines = join_fitting(items, " • ", "helvetica", 10, 80)
        self.assertGreater(len(lines), 1)
        for line in lines[:-1]:
            self.assertTrue(line.endswith(" •"))
            self.assertLessEqual(text_width(line[:-2], "helvetica", 10), 80)
        rejoined = " ".join(lines).replace(" • ", "|").replace(" •", "|").split("|")
        self.assertEqual([r.strip() for r in rejoined], items)

    def test_join_fitting_empty(self):
        self.assertEqual(join_fitting([], ", ", "helvetica", 10, 80), [])
        self.assertEqual(join_fitting(["", ""], ", ", "helvetica", 10, 80), [])


class TestEmptySections(unittest.TestCase):
    def test_empty_sections_write_nothing(self):
        profile = get_profile("classic")
        for key, formatter in FORMATTERS.items():
            cursor = new_cursor(profile)
            start = cursor.y
            formatter(cursor, profile, PersonalInfo() if key == "summary" else [])
            self.assertEqual(cursor.pages, [[]], key)
            self.assertEqual(cursor.y, start, key)


class TestHeader(unittest.TestCase):
    def test_placeholder_name(self):
        profile = get_profile("classic")
        cursor = new_cursor(profile)
        format_header(cursor, profile, PersonalInfo())
        ops = text_ops(cursor)
        self.assertEqual([op.text for op in ops], [PLACEHOLDER_NAME])

    def test_centered_header(self):
        profile = get_profile("modern")
        cursor = new_cursor(profile)
        format_header(cursor, profile, full_cv().personal_info)
        ops = text_ops(cursor)
        self.assertTrue(all(op.align == "center" for op in ops))
        self.assertTrue(all(op.x == profile.page_width / 2 for op in ops))
        contact = [op for op in ops if "grace@example.com" in op.text]
        self.assertEqual(contact[0].font, "Times-Roman")

    def test_inline_contact_joins_details(self):
        profile = get_profile("classic")
        cursor = new_cursor(profile)
        format_header(cursor, profile, full_cv().personal_info)
        texts = [op.text for op in text_ops(cursor)]
        self.assertIn("grace@example.com | +1 555 0100 | Arlington, VA", texts)
        self.assertIn("linkedin.com/in/gracehopper | github.com/ghopper", texts)

    def test_stacked_contact_links(self):
        profile = get_profile("minimal")
        cursor = new_cursor(profile)
        format_header(cursor, profile, full_cv().personal_info)
        ops = text_ops(cursor)
        linked = [op for op in ops if op.link]
        self.assertEqual([op.link for op in linked],
                         ["https://linkedin.com/in/gracehopper", "https://github.com/ghopper"])
        self.assertTrue(all(op.color == profile.colors.link for op in linked))
        self.assertIn("grace@example.com", [op.text for op in ops])

    def test_modern_uses_times_throughout(self):
        profile = get_profile("modern")
        cursor = new_cursor(profile)
        format_header(cursor, profile, full_cv().personal_info)
        FORMATTERS["work"](cursor, profile, full_cv().work_experience)
        fonts = {op.font for op in text_ops(cursor)}
        self.assertTrue(fonts)
        self.assertTrue(all(font.startswith("Times") for font in fonts), fonts)

    def test_column_contact_block(self):
        profile = get_profile("professional")
        cursor = new_cursor(profile)
        format_header(cursor, profile, full_cv().personal_info)
        ops = {op.text: op for op in text_ops(cursor)}

        email = ops["Email: grace@example.com"]
        location = ops["Location: Arlington, VA"]
        linkedin = ops["LinkedIn: linkedin.com/in/gracehopper"]
        self.assertEqual(email.x, cursor.content_left)
        self.assertEqual(location.x, profile.page_width / 2 + 10)
        self.assertEqual(location.y, email.y)
        self.assertEqual(ops["Phone: +1 555 0100"].y, linkedin.y)
        self.assertEqual(linkedin.link, "https://linkedin.com/in/gracehopper")
        self.assertIn("GitHub: github.com/ghopper", ops)
        self.assertEqual(email.link, "")


class TestSectionHeader(unittest.TestCase):
    def test_rule_below_title(self):
        profile = get_profile("classic")
        cursor = new_cursor(profile)
        write_section_header(cursor, profile, "work")
        title, rule = cursor.pages[0]
        self.assertEqual(title.text, "PROFESSIONAL EXPERIENCE")
        self.assertIsInstance(rule, LineOp)
        self.assertGreater(rule.y1, title.y)

    def test_rule_above_title(self):
        profile = get_profile("executive")
        cursor = new_cursor(profile)
        write_section_header(cursor, profile, "skills")
        rule, title = cursor.pages[0]
        self.assertEqual(title.text, "CORE COMPETENCIES")
        self.assertLess(rule.y1, title.y)
        self.assertEqual(rule.color, "#3498DB")

    def test_rule_just_under_title_line(self):
        profile = get_profile("professional")
        cursor = new_cursor(profile)
        write_section_header(cursor, profile, "education")
        title, rule = cursor.pages[0]
        lh = profile.fonts.section_header * profile.line_height * 0.35
        self.assertAlmostEqual(rule.y1 - title.y, lh + 0.5)
        self.assertAlmostEqual(cursor.y - title.y, lh + 6.0)

    def test_executive_activities_title(self):
        profile = get_profile("executive")
        cursor = new_cursor(profile)
        write_section_header(cursor, profile, "extracurricular")
        self.assertEqual(cursor.pages[0][1].text, "ADDITIONAL ACTIVITIES")

    def test_style_titles(self):
        profile = get_profile("minimal")
        cursor = new_cursor(profile)
        write_section_header(cursor, profile, "work")
        self.assertEqual(cursor.pages[0][0].text, "EXPERIENCE")


class TestWorkExperience(unittest.TestCase):
    def test_current_job_ends_in_present(self):
        profile = get_profile("classic")
        cursor = new_cursor(profile)
        format_work_experience(cursor, profile, full_cv().work_experience)
        dates = [op.text for op in text_ops(cursor) if op.align == "right"]
        self.assertEqual(dates, ["Aug 1967 - Aug 1986", "Jan 1949 - Present"])
        for op in text_ops(cursor):
            if op.align == "right":
                self.assertEqual(op.x, cursor.content_right)

    def test_bullets_use_hanging_indent(self):
        profile = get_profile("classic")
        cursor = new_cursor(profile)
        format_work_experience(cursor, profile, full_cv().work_experience)
        ops = text_ops(cursor)
        glyphs = [op for op in ops if op.text == BULLET]
        self.assertEqual(len(glyphs), 3)
        texts = [op for op in ops if op.text.startswith("Standardised")]
        self.assertEqual(texts[0].x, cursor.content_left + profile.bullet_indent)
        self.assertEqual(texts[0].y, glyphs[0].y)

    def test_company_used_as_title_without_position(self):
        profile = get_profile("classic")
        cursor = new_cursor(profile)
        format_work_experience(cursor, profile, [WorkExperience(company="Acme", position="", location="Leeds")])
        texts = [op.text for op in text_ops(cursor)]
        self.assertIn("Acme", texts)
        self.assertIn("Leeds", texts)
        self.assertNotIn("Acme | Leeds", texts)

    def test_heading_kept_with_first_bullet(self):
        profile = get_profile("classic")
        cursor = new_cursor(profile)
        cursor.write("filler", cursor.content_left, "Helvetica", 10)
        cursor.advance(cursor.remaining - 30)
        job = WorkExperience(company="Acme", position="Engineer", location="Leeds",
                             bullet_points=[BulletPoint("1", "Did things.")])
        format_work_experience(cursor, profile, [job])

        self.assertEqual(page_of(cursor, "Engineer"), page_of(cursor, "Did things."))
        self.assertEqual(page_of(cursor, "Engineer"), 1)
        self.assertEqual(page_of(cursor, "PROFESSIONAL EXPERIENCE"), 1)
        self.assertEqual([op.text for op in text_ops(cursor, 0)], ["filler"])

    def test_header_stays_when_first_entry_fits(self):
        profile = get_profile("classic")
        cursor = new_cursor(profile)
        cursor.write("filler", cursor.content_left, "Helvetica", 10)
        cursor.advance(cursor.remaining - 40)
        job = WorkExperience(company="Acme", position="Engineer", location="Leeds",
                             bullet_points=[BulletPoint("1", "Did things.")])
        format_work_experience(cursor, profile, [job])

        self.assertEqual(cursor.page_count, 1)
        self.assertEqual(page_of(cursor, "PROFESSIONAL EXPERIENCE"), 0)
        self.assertEqual(page_of(cursor, "Did things."), 0)

    def test_no_ops_below_bottom_margin(self):
        profile = get_profile("classic")
        cursor = new_cursor(profile)
        bullets = [BulletPoint(str(i), "word " * 60) for i in range(20)]
        format_work_experience(cursor, profile, [WorkExperience(company="Acme", position="Engineer",
                                                                bullet_points=bullets)])
        self.assertGreater(cursor.page_count, 1)
        for op in text_ops(cursor):
            self.assertLessEqual(op.y, cursor.bottom_limit)


class TestSkills(unittest.TestCase):
    def test_grouped_labels(self):
        profile = get_profile("executive")
        cursor = new_cursor(profile)
        format_skills(cursor, profile, full_cv().skills)
        texts = [op.text for op in text_ops(cursor)]
        self.assertIn("Languages:", texts)
        self.assertIn("Systems:", texts)
        self.assertIn("Other:", texts)
        self.assertIn("COBOL • FLOW-MATIC", texts)

    def test_flat_list(self):
        profile = get_profile("minimal")
        cursor = new_cursor(profile)
        format_skills(cursor, profile, full_cv().skills)
        texts = [op.text for op in text_ops(cursor)]
        self.assertIn("COBOL, FLOW-MATIC, Compilers, Leadership", texts)

    def test_grouped_style_without_categories_is_flat(self):
        profile = get_profile("tech")
        cursor = new_cursor(profile)
        format_skills(cursor, profile, [Skill(name="Go"), Skill(name="Rust")])
        texts = [op.text for op in text_ops(cursor)]
        self.assertIn("Go • Rust", texts)
        self.assertNotIn("Other:", texts)


class TestOtherSections(unittest.TestCase):
    def test_education_details(self):
        profile = get_profile("classic")
        cursor = new_cursor(profile)
        FORMATTERS["education"](cursor, profile, full_cv().education)
        texts = [op.text for op in text_ops(cursor)]
        self.assertIn("PhD in Mathematics", texts)
        self.assertIn("Yale University", texts)
        self.assertIn("Second Class Upper", texts)
        self.assertIn("Sep 1930 - Jun 1934", texts)

    def test_project_link(self):
        profile = get_profile("classic")
        cursor = new_cursor(profile)
        FORMATTERS["projects"](cursor, profile, full_cv().projects)
        ops = text_ops(cursor)
        links = [op for op in ops if op.link]
        self.assertEqual(len(links), 1)
        self.assertEqual(links[0].text, "example.com/a0")
        self.assertEqual(links[0].link, "https://example.com/a0")
        self.assertIn("Technologies:", [op.text for op in ops])
        self.assertIn("UNIVAC I, Assembly", [op.text for op in ops])

    def test_certification(self):
        profile = get_profile("classic")
        cursor = new_cursor(profile)
        FORMATTERS["certifications"](cursor, profile, full_cv().certifications)
        texts = [op.text for op in text_ops(cursor)]
        self.assertIn("Jan 1969", texts)
        self.assertIn("DPMA", texts)
        self.assertIn("Credential ID: DPMA-1969", texts)

    def test_ongoing_activity_ends_in_present(self):
        profile = get_profile("classic")
        cursor = new_cursor(profile)
        activity = Extracurricular(title="Volunteer", organization="Red Cross", start_date="1999-01",
                                   end_date="2001-01", is_ongoing=True)
        FORMATTERS["extracurricular"](cursor, profile, [activity])
        ops = text_ops(cursor)
        dates = [op for op in ops if op.align == "right"]
        self.assertEqual([op.text for op in dates], ["Jan 1999 - Present"])
        self.assertEqual(dates[0].x, cursor.content_right)
        self.assertIn("Red Cross", [op.text for op in ops])
        self.assertNotIn("2001", " ".join(op.text for op in ops))


if __name__ == '__main__':
    unittest.main()
