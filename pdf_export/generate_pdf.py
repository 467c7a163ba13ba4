"""
Render a local HTML document to an A4 PDF with headless Chromium.

Run with:
    python -m pdf_export.generate_pdf --html PROJECT_DOCS.html --out PROJECT_DOCS.pdf
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from playwright.sync_api import sync_playwright
from pydantic import BaseModel, Field


logger = logging.getLogger("taskmgrr.export")


PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_HTML_PATH = PROJECT_ROOT / "PROJECT_DOCS.html"
DEFAULT_PDF_PATH = Path("PROJECT_DOCS.pdf")


class PdfOptions(BaseModel):
    page_format: str = "A4"
    margin: str = "20mm"
    print_background: bool = True
    timeout_ms: int = Field(60_000, gt=0)

    def margins(self) -> dict:
        return {side: self.margin for side in ("top", "right", "bottom", "left")}


def export_pdf(
    html_path: Path,
    output_path: Path,
    options: Optional[PdfOptions] = None,
) -> Path:
    """
    Load ``html_path`` in a headless browser and print it to ``output_path``.

    Navigation waits for network idle and fails after ``options.timeout_ms``.
    The browser is closed on every exit path.
    """
    options = options or PdfOptions()
    html_path = Path(html_path).resolve()
    output_path = Path(output_path)
    if not html_path.is_file():
        raise FileNotFoundError(f"HTML input not found: {html_path}")

    logger.info("Launching browser...")
    with sync_playwright() as playwright:
        browser = playwright.chromium.launch(headless=True)
        try:
            page = browser.new_page()
            file_url = html_path.as_uri()
            logger.info("Loading HTML from: %s", file_url)
            page.goto(file_url, wait_until="networkidle", timeout=options.timeout_ms)

            logger.info("Generating PDF...")
            output_path.parent.mkdir(parents=True, exist_ok=True)
            page.pdf(
                path=str(output_path),
                format=options.page_format,
                print_background=options.print_background,
                margin=options.margins(),
            )
        finally:
            browser.close()

    logger.info("PDF generated successfully: %s", output_path)
    return output_path


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Export a local HTML file to PDF.")
    parser.add_argument("--html", default=str(DEFAULT_HTML_PATH))
    parser.add_argument("--out", default=str(DEFAULT_PDF_PATH))
    parser.add_argument("--timeout", type=float, default=60, help="seconds")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)

    try:
        options = PdfOptions(timeout_ms=int(args.timeout * 1000))
        export_pdf(Path(args.html), Path(args.out), options)
    except Exception:
        logger.exception("Error generating PDF")
        return 1
    return 0


__all__ = ["PdfOptions", "export_pdf", "main"]


if __name__ == "__main__":
    sys.exit(main())
