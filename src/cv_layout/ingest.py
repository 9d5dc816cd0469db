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
Loads CV JSON documents (as exported by the form layer) from disk or a URL.
"""

import json
import logging

import requests

from cv_layout.models import CVData

logger = logging.getLogger(__name__)


class CVLoadError(Exception):
    """The CV source could not be read or is not a CV document."""


def read_url(url: str) -> str:
    """Fetches a remote document and returns its body as text."""
    logger.info(f"Fetching CV from: {url}")
    resp = requests.get(url, timeout=15)
    resp.raise_for_status()
    return resp.text


def read_file(path: str) -> str:
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def parse_cv(text: str) -> CVData:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise CVLoadError(f"Invalid CV JSON: {e}") from e
    if not isinstance(data, dict):
        raise CVLoadError("CV JSON must be an object")
    # Some exports wrap the CV under a "cv"/"cvData" key.
    for key in ("cv", "cvData"):
        if isinstance(data.get(key), dict):
            data = data[key]
            break
    return CVData.from_dict(data)


def load_cv(source: str) -> CVData:
    """
    Loads a CV from a local JSON file or an http(s) URL.

    Raises:
        CVLoadError: when the source cannot be read or parsed.
    """
    try:
        if source.startswith(("http://", "https://")):
            text = read_url(source)
        else:
            text = read_file(source)
    except (OSError, requests.RequestException) as e:
        raise CVLoadError(f"Could not read {source}: {e}") from e

    cv = parse_cv(text)
    logger.debug(f"Loaded CV for '{cv.personal_info.full_name or 'unnamed'}' from {source}")
    return cv
