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

from cv_layout.cursor import CursorFinalizedError, CursorState, LineOp, PageCursor, TextOp
from cv_layout.styles import Margins


class TestPageCursor(unittest.TestCase):
    def setUp(self):
        self.cursor = PageCursor(210, 297, Margins(15, 15, 15, 15))

    def test_initial_state(self):
        self.assertEqual(self.cursor.y, 15)
        self.assertEqual(self.cursor.page_index, 0)
        self.assertEqual(self.cursor.page_count, 1)
        self.assertEqual(self.cursor.state, CursorState.WRITING)
        self.assertEqual(self.cursor.content_width, 180)
        self.assertEqual(self.cursor.bottom_limit, 282)

    def test_ensure_space_without_break(self):
        self.cursor.write("x", 15, "Helvetica", 10)
        self.assertFalse(self.cursor.ensure_space(100))
        self.assertEqual(self.cursor.page_index, 0)

    def test_ensure_space_breaks_and_resets_to_top_margin(self):
        self.cursor.write("x", 15, "Helvetica", 10)
        self.cursor.advance(260)
        self.assertTrue(self.cursor.ensure_space(10))
        self.assertEqual(self.cursor.page_index, 1)
        self.assertEqual(self.cursor.y, 15)
        self.assertEqual(self.cursor.page_count, 2)

    def test_exact_fit_does_not_break(self):
        self.cursor.write("x", 15, "Helvetica", 10)
        self.cursor.advance(257)
        self.assertFalse(self.cursor.ensure_space(10))

    def test_empty_page_is_not_broken_again(self):
        self.assertFalse(self.cursor.ensure_space(1000))
        self.assertEqual(self.cursor.page_count, 1)

    def test_write_does_not_check_space(self):
        self.cursor.advance(400)
        self.cursor.write("overflow", 15, "Helvetica", 10)
        self.assertEqual(self.cursor.page_count, 1)
        self.assertEqual(self.cursor.pages[0][0].y, 415)

    def test_write_records_text_op_at_cursor(self):
        self.cursor.advance(5)
        self.cursor.write("Hello", 20, "Helvetica-Bold", 12, color="#112233", align="right", link="https://x.y")
        op = self.cursor.pages[0][0]
        self.assertEqual(op, TextOp(x=20, y=20, text="Hello", font="Helvetica-Bold", size=12,
                                    color="#112233", align="right", link="https://x.y"))

    def test_empty_text_is_not_recorded(self):
        self.cursor.write("", 15, "Helvetica", 10)
        self.assertEqual(self.cursor.pages[0], [])

    def test_rule_uses_offset(self):
        self.cursor.rule(15, 195, offset=-1, width=0.5, color="#969696")
        op = self.cursor.pages[0][0]
        self.assertIsInstance(op, LineOp)
        self.assertEqual((op.y1, op.y2), (14, 14))

    def test_page_break_property_over_many_writes(self):
        limit = self.cursor.bottom_limit
        for i in range(500):
            self.cursor.ensure_space(4.2)
            self.cursor.write(f"line {i}", 15, "Helvetica", 10)
            self.assertLessEqual(self.cursor.y, limit)
            self.cursor.advance(4.2)
            self.assertLessEqual(self.cursor.y, limit + 1e-9)
        self.assertGreater(self.cursor.page_count, 1)

    def test_finalize_blocks_further_writes(self):
        self.cursor.write("x", 15, "Helvetica", 10)
        pages = self.cursor.finalize()
        self.assertEqual(len(pages), 1)
        self.assertEqual(self.cursor.state, CursorState.FINALIZED)
        with self.assertRaises(CursorFinalizedError):
            self.cursor.write("y", 15, "Helvetica", 10)
        with self.assertRaises(CursorFinalizedError):
            self.cursor.advance(1)
        with self.assertRaises(CursorFinalizedError):
            self.cursor.ensure_space(1)
        with self.assertRaises(CursorFinalizedError):
            self.cursor.finalize()


if __name__ == '__main__':
    unittest.main()
