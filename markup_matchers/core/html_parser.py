"""
HTML Parser Module
Parses HTML content into BeautifulSoup trees that the element matchers inspect.
"""

from bs4 import BeautifulSoup, Tag
from typing import Union
from pathlib import Path
import logging

logger = logging.getLogger(__name__)

class HTMLParser:
    """Parser for HTML content."""

    def __init__(self, features: str = 'html.parser'):
        """Initialize the HTML parser with the BeautifulSoup tree builder to use."""
        self.features = features

    def parse_file(self, file_path: Union[str, Path]) -> BeautifulSoup:
        """Parse HTML file and return the document tree."""
        try:
            logger.info(f"Starting to parse file: {file_path}")
            path = Path(file_path)

            with open(path, 'r', encoding='utf-8') as f:
                content = f.read()
                logger.debug(f"Successfully read file, content length: {len(content)}")

            return self.parse(content)

        except Exception as e:
            logger.error(f"Error parsing file {file_path}: {str(e)}", exc_info=True)
            raise

    def parse(self, html_content: str) -> BeautifulSoup:
        """Parse HTML content into a document tree."""
        logger.debug(f"Input HTML content length: {len(html_content)}")
        soup = BeautifulSoup(html_content, self.features)
        logger.debug("BeautifulSoup parsing complete")
        return soup

    def parse_element(self, html_content: str) -> Tag:
        """
        Parse an HTML fragment and return its first element.

        Args:
            html_content: Markup such as '<div class="a b"></div>'

        Returns:
            The first Tag in the fragment (the body's first child when the
            markup is a full document)

        Raises:
            ValueError: If the markup contains no element
        """
        soup = self.parse(html_content)
        root = soup.body if soup.body else soup
        element = root.find(True)
        if element is None:
            logger.error("No element found in HTML content")
            raise ValueError(f"No element found in HTML content: {html_content!r}")

        logger.debug(f"Using element: {element.name}")
        return element
