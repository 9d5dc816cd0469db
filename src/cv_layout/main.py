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
Main entry point for the CV Layout CLI.
"""

import argparse
import logging
import os
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from cv_layout.exporters import export_docx, export_text
from cv_layout.generator import CVGenerator, suggested_file_name
from cv_layout.ingest import CVLoadError, load_cv
from cv_layout.styles import ALIASES, DEFAULT_STYLE, available_styles, get_profile

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_DIR = "user_content/generated_cvs"


def setup_logging(verbosity: int, quiet: bool = False):
    """
    Configures logging:
    - File: user_content/logs/cv.log (DEBUG)
    - Console: Default=ERROR, -v=WARNING, -vv=INFO, -vvv=DEBUG, -q=ERROR
    """
    log_dir = Path("user_content/logs")
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "cv.log"

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    file_handler = logging.FileHandler(log_file)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    root.addHandler(file_handler)

    if quiet or verbosity == 0:
        level = logging.ERROR
    elif verbosity == 1:
        level = logging.WARNING
    elif verbosity == 2:
        level = logging.INFO
    else:
        level = logging.DEBUG

    console_handler = RichHandler(console=Console(stderr=True), show_path=False)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter('%(message)s'))
    root.addHandler(console_handler)

    if verbosity < 3:
        logging.getLogger("urllib3").setLevel(logging.WARNING)
        logging.getLogger("reportlab").setLevel(logging.WARNING)


def _resolve_path(path: str, default_subdir: str) -> str:
    """
    Resolves a source path:
    1. If it exists as is (or is a URL), return it.
    2. If it exists in user_content/{default_subdir}/{path}, return that.
    3. Return original path (to let downstream fail/handle it).
    """
    if not path:
        return path
    if os.path.exists(path) or path.startswith(("http://", "https://")):
        return path
    namespaced_path = os.path.join("user_content", default_subdir, path)
    if os.path.exists(namespaced_path):
        logger.info(f"Resolved '{path}' to '{namespaced_path}'")
        return namespaced_path
    return path


def list_styles(console: Console):
    table = Table(title="Available styles")
    table.add_column("Style")
    table.add_column("Name")
    table.add_column("Aliases")
    for profile in available_styles():
        aliases = ", ".join(a for a, key in ALIASES.items() if key == profile.key)
        name = f"{profile.display_name} (default)" if profile.key == DEFAULT_STYLE else profile.display_name
        table.add_row(profile.key, name, aliases)
    console.print(table)


def _output_path(args, file_name: str) -> Path:
    if args.output:
        return Path(args.output)
    return Path(args.output_dir) / file_name


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render CV JSON into a paginated document")
    parser.add_argument("source", nargs="?", help="Path or URL of the CV JSON document")
    parser.add_argument("--style", help="Style profile id (defaults to the CV's templateId)")
    parser.add_argument("--format", choices=["pdf", "docx", "txt"], default="pdf", help="Output format (default: pdf)")
    parser.add_argument("--output", help="Output file path (defaults to a name derived from the CV)")
    parser.add_argument("--output-dir", default=DEFAULT_OUTPUT_DIR, help=f"Directory for generated files (default: {DEFAULT_OUTPUT_DIR})")
    parser.add_argument("--list-styles", action="store_true", help="List available style profiles and exit")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase output verbosity (-v=WARNING, -vv=INFO, -vvv=DEBUG)")
    parser.add_argument("-q", "--quiet", action="store_true", help="Suppress status output (ERROR only)")
    return parser


def main(argv=None):
    try:
        return _main_cli(argv)
    except KeyboardInterrupt:
        sys.stderr.write("\n\033[31m[-] Cancelled by user\033[0m\n")
        sys.exit(130)


def _main_cli(argv=None):
    """
    Parses arguments, loads the CV and writes the requested document.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list_styles:
        list_styles(Console())
        return 0

    if not args.source:
        parser.error("A CV source is required unless --list-styles is used.")

    setup_logging(args.verbose, quiet=args.quiet)
    logger.info("--- CV Layout ---")

    source = _resolve_path(args.source, "inputs")
    try:
        cv = load_cv(source)
    except CVLoadError as e:
        logger.error(str(e))
        sys.exit(1)

    style_id = args.style if args.style else cv.template_id
    try:
        if args.format == "pdf":
            CVGenerator().save(cv, args.output, args.output_dir, style_id)
        else:
            stem = suggested_file_name(cv.personal_info.full_name, get_profile(style_id))[:-len(".pdf")]
            path = _output_path(args, f"{stem}.{args.format}")
            if args.format == "docx":
                export_docx(cv, path)
            else:
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text(export_text(cv), encoding="utf-8")
                logger.info(f"Wrote plain text CV to: {path}")
    except Exception as e:
        logger.error(f"Error generating CV: {e}")
        sys.exit(1)

    logger.info("Done!")
    return 0


if __name__ == "__main__":
    main()
