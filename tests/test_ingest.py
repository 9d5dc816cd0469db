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

import json
import os
import shutil
import tempfile
import unittest
from unittest.mock import MagicMock, patch

import requests

from cv_layout import ingest
from cv_layout.ingest import CVLoadError

from cv_fixtures import full_cv


class TestIngest(unittest.TestCase):
    def setUp(self):
        self.test_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def _write(self, name, content):
        path = os.path.join(self.test_dir, name)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)
        return path

    def test_load_file(self):
        path = self._write("cv.json", json.dumps(full_cv().to_dict()))
        self.assertEqual(ingest.load_cv(path), full_cv())

    def test_wrapped_document(self):
        path = self._write("cv.json", json.dumps({"cvData": {"personalInfo": {"fullName": "Ada"}}}))
        self.assertEqual(ingest.load_cv(path).personal_info.full_name, "Ada")

    def test_invalid_json(self):
        path = self._write("bad.json", "{not json")
        with self.assertRaises(CVLoadError):
            ingest.load_cv(path)

    def test_non_object_json(self):
        with self.assertRaises(CVLoadError):
            ingest.parse_cv("[1, 2, 3]")

    def test_missing_file(self):
        with self.assertRaises(CVLoadError):
            ingest.load_cv(os.path.join(self.test_dir, "nonexistent.json"))

    @patch('cv_layout.ingest.requests.get')
    def test_read_url(self, mock_get):
        mock_response = MagicMock()
        mock_response.text = json.dumps({"personalInfo": {"fullName": "Remote Person"}})
        mock_get.return_value = mock_response

        cv = ingest.load_cv("https://example.com/cv.json")
        self.assertEqual(cv.personal_info.full_name, "Remote Person")
        mock_get.assert_called_once_with("https://example.com/cv.json", timeout=15)
        mock_response.raise_for_status.assert_called_once()

    @patch('cv_layout.ingest.requests.get', side_effect=requests.ConnectionError("offline"))
    def test_url_failure(self, _get):
        with self.assertRaises(CVLoadError):
            ingest.load_cv("https://example.com/cv.json")


if __name__ == '__main__':
    unittest.main()
