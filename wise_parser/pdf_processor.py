"""Read Wise statement PDFs and hand their text to the parser."""

from pathlib import Path
from typing import Optional

import pdfplumber
from loguru import logger

from .config import get_settings
from .errors import StatementFileError
from .models import ParseResult
from .parser import parse


class PDFProcessor:
    """Extract statement text from PDF files with pdfplumber."""

    def __init__(self, max_file_size: Optional[int] = None):
        """
        Initialize PDF processor.

        Args:
            max_file_size: Upload cap in bytes (defaults to WISE_MAX_FILE_SIZE)
        """
        self.max_file_size = max_file_size or get_settings().max_file_size
        logger.debug(f"PDF Processor initialized (max {self.max_file_size} bytes)")

    def validate_file(self, pdf_path: str) -> Path:
        """
        Check that the file exists, looks like a PDF and is within the size cap.

        Args:
            pdf_path: Path to PDF file

        Returns:
            The path as a Path object
        """
        path = Path(pdf_path)
        if not path.exists():
            raise StatementFileError(f"PDF not found: {path}", path.name)

        if path.suffix.lower() != ".pdf":
            raise StatementFileError("File must be a PDF", path.name)

        size = path.stat().st_size
        if size == 0:
            raise StatementFileError("PDF file is empty", path.name)

        if size > self.max_file_size:
            limit_mb = self.max_file_size / (1024 * 1024)
            raise StatementFileError(f"File size must be less than {limit_mb:g}MB", path.name)

        return path

    def extract_text(self, pdf_path: str) -> str:
        """
        Extract text from PDF using pdfplumber.

        Args:
            pdf_path: Path to PDF file

        Returns:
            Page texts joined with newlines
        """
        path = self.validate_file(pdf_path)
        text_content = []

        try:
            with pdfplumber.open(str(path)) as pdf:
                for page_num, page in enumerate(pdf.pages, 1):
                    text = page.extract_text()
                    if text:
                        text_content.append(text)
                    else:
                        logger.warning(f"No text found on page {page_num}")
        except Exception as e:
            logger.error(f"Text extraction failed: {e}")
            raise StatementFileError(f"Could not read PDF: {e}", path.name) from e

        full_text = "\n".join(text_content)
        if not full_text.strip():
            raise StatementFileError("PDF has no extractable text", path.name)

        logger.info(f"Extracted {len(full_text)} characters from {path}")
        return full_text

    def parse_file(self, pdf_path: str) -> ParseResult:
        """Extract the text of a statement PDF and parse it."""
        return parse(self.extract_text(pdf_path))
