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

import sys

from pypdf import PdfReader

def inspect(path):
    print(f"--- Inspecting: {path} ---")
    reader = PdfReader(path)

    print("\n[METADATA]")
    meta = reader.metadata or {}
    for key in ("/Title", "/Author", "/Subject", "/Keywords", "/Creator"):
        print(f"  {key[1:]}: {meta.get(key)}")

    print(f"\n[PAGES] {len(reader.pages)}")
    for i, page in enumerate(reader.pages, start=1):
        lines = [l for l in page.extract_text().splitlines() if l.strip()]
        print(f"Page {i}: {len(lines)} lines")
        for line in lines[:3]:
            print(f"  > '{line[:60]}'")
        if len(lines) > 3:
            print(f"  ... last: '{lines[-1][:60]}'")

if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: inspect_pdf.py <file.pdf>")
        sys.exit(1)
    inspect(sys.argv[1])
