"""
HTML to PDF rendering through a headless Chrome/Edge/Chromium driven by playwright.
"""

import logging
from typing import Optional

from playwright.async_api import async_playwright

from ... import config


class ChromePdfRenderer:
    """
    Renders HTML content to a PDF file with a system-installed browser.

    Each call launches its own browser process and closes it before
    returning, whether rendering succeeded, failed or was cancelled.
    """

    def __init__(self,
                 launch_args: Optional[list[str]] = None,
                 page_format: str = config.PDF_PAGE_FORMAT,
                 margins: Optional[dict[str, str]] = None,
                 print_background: bool = config.PDF_PRINT_BACKGROUND):
        self.launch_args = list(config.BROWSER_LAUNCH_ARGS if launch_args is None else launch_args)
        self.page_format = page_format
        self.margins = dict(config.PDF_MARGINS if margins is None else margins)
        self.print_background = print_background
        self.logger = logging.getLogger(__name__)

    async def render(self, html_content: str, pdf_path: str, executable_path: str) -> None:
        """
        Load the HTML content into a fresh page and print it to ``pdf_path``.

        Args:
            html_content: Complete HTML document, set directly on the page
            pdf_path: Destination PDF file
            executable_path: Browser executable to launch
        """
        async with async_playwright() as playwright:
            browser = await playwright.chromium.launch(
                executable_path=executable_path,
                headless=True,
                args=self.launch_args,
            )
            self.logger.debug(f"Launched headless browser: {executable_path}")
            try:
                page = await browser.new_page()
                await page.set_content(html_content)
                await page.pdf(
                    path=pdf_path,
                    format=self.page_format,
                    print_background=self.print_background,
                    margin=self.margins,
                )
            finally:
                await browser.close()
                self.logger.debug("Closed headless browser")

    def get_method_name(self) -> str:
        return "chrome-pdf"
