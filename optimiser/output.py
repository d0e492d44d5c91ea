"""On-disk layout of a run.

::

    <output_dir>/<sanitised-domain>/
        raw/<url-path>.md          one per crawled URL
        optimised/<page-type>.md   one per distinct page type
        header-footer.md           only when a common header/footer exists
"""

from __future__ import annotations

import logging
import re
import shutil
from pathlib import Path
from urllib.parse import urlsplit

from optimiser.config import settings

logger = logging.getLogger(__name__)

RAW_DIR = "raw"
OPTIMISED_DIR = "optimised"
HEADER_FOOTER_FILE = "header-footer.md"


def sanitize_domain(url: str) -> str:
    """``https://www.example.com`` → ``www_example_com``."""
    host = urlsplit(url).hostname or ""
    return re.sub(r"[^a-z0-9]", "_", host, flags=re.IGNORECASE)


def page_filename(url: str) -> str:
    """Derive the raw file name from the URL path; the site root is ``index.md``."""
    path = urlsplit(url).path.strip("/") or "index"
    return f"{path.replace('/', '_')}.md"


class OutputWriter:
    """Writes one run's files below ``<output_dir>/<domain>``."""

    def __init__(self, seed_url: str, output_dir: Path | None = None) -> None:
        base = Path(output_dir) if output_dir is not None else settings.output_dir
        self.root = base / sanitize_domain(seed_url)

    def clear(self) -> None:
        """Remove everything from a previous run of the same domain."""
        if self.root.exists():
            logger.info("Clearing output directory: %s", self.root)
            shutil.rmtree(self.root)

    def _write(self, directory: Path, filename: str, content: str) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / filename
        path.write_text(content, encoding="utf-8")
        return path

    def write_raw(self, url: str, markdown: str) -> Path:
        return self._write(self.root / RAW_DIR, page_filename(url), markdown)

    def write_optimised(self, page_type: str, content: str) -> Path:
        return self._write(self.root / OPTIMISED_DIR, f"{page_type}.md", content)

    def write_header_footer(self, content: str) -> Path:
        return self._write(self.root, HEADER_FOOTER_FILE, content)
