"""
Resume document parsing for ResumeForge.

Extracts plain text from PDF, DOCX, text and Markdown resumes (files on disk
or raw bytes) and pulls out basic structured information.
"""

import io
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

import PyPDF2
from docx import Document
from rich.console import Console

from .config import get_config_manager

console = Console()

TEXT_ENCODINGS = ['utf-8', 'latin-1', 'cp1252']

EMAIL_PATTERN = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
PHONE_PATTERN = re.compile(r"(?:\+\d{1,3}[-.\s]?)?\(?\d{2,4}\)?[-.\s]?\d{3,4}[-.\s]?\d{3,4}\b")
# Upper-case header line, e.g. "WORK EXPERIENCE" or "SKILLS:"
SECTION_HEADER_PATTERN = re.compile(r"^([A-Z][A-Z &/-]{2,})\s*:?\s*$")


@dataclass
class ParseResult:
    """Outcome of extracting text from a resume document."""
    success: bool
    text: str = ""
    error: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ResumeInfo:
    """Basic structured information found in resume text."""
    name: str
    email: Optional[str]
    phone: Optional[str]
    sections: Dict[str, str]
    full_text: str


class ResumeParser:
    """Handles resume document validation and text extraction."""

    SUPPORTED_EXTENSIONS = {'.pdf', '.txt', '.md', '.docx'}

    def __init__(self, max_file_size_mb: Optional[float] = None):
        if max_file_size_mb is None:
            max_file_size_mb = get_config_manager().get('parsing', 'max_file_size_mb')
        self.max_file_size = int(max_file_size_mb * 1024 * 1024)

    def parse_file(self, file_path: Union[str, Path]) -> ParseResult:
        """
        Extract text from a resume file.

        Args:
            file_path: Path to a .pdf, .docx, .txt or .md file

        Returns:
            ParseResult; success is False with an error message on any failure
        """
        path = Path(file_path)

        validation_error = self._validate_file(path)
        if validation_error:
            return ParseResult(success=False, error=validation_error)

        try:
            content = path.read_bytes()
        except OSError as e:
            return ParseResult(success=False, error=f"Could not read file: {e}")

        return self.parse_bytes(content, path.name)

    def parse_bytes(self, content: bytes, filename: str) -> ParseResult:
        """
        Extract text from raw document bytes.

        Args:
            content: File content
            filename: Original file name, used to pick the format

        Returns:
            ParseResult with extracted text and metadata
        """
        extension = Path(filename).suffix.lower()

        if extension not in self.SUPPORTED_EXTENSIONS:
            return ParseResult(success=False, error=self._unsupported_message(extension))

        if not content:
            return ParseResult(success=False, error="File is empty")

        if len(content) > self.max_file_size:
            return ParseResult(success=False, error=self._too_large_message(len(content)))

        metadata: Dict[str, Any] = {
            "file_name": filename,
            "file_type": extension[1:],
            "file_size": len(content),
        }

        try:
            if extension == '.pdf':
                text, pages = self._extract_pdf_text(content)
                metadata["pages"] = pages
            elif extension == '.docx':
                text = self._extract_docx_text(content)
            else:
                text, encoding = self._extract_text_file(content)
                metadata["encoding"] = encoding
        except Exception as e:
            console.print(f"[red]Error extracting text from {filename}: {e}[/red]")
            return ParseResult(success=False, error=f"Error extracting text: {e}", metadata=metadata)

        if not text.strip():
            return ParseResult(success=False, error=f"No text content could be extracted from {filename}",
                               metadata=metadata)

        metadata["characters"] = len(text)
        console.print(f"[dim]Extracted {len(text)} characters of text content from {filename}[/dim]")
        return ParseResult(success=True, text=text, metadata=metadata)

    def _unsupported_message(self, extension: str) -> str:
        supported = ', '.join(sorted(self.SUPPORTED_EXTENSIONS))
        return f"Unsupported file type: {extension or '(none)'}. Supported: {supported}"

    def _too_large_message(self, size: int) -> str:
        return f"File too large: {size / (1024 * 1024):.1f}MB (max: {self.max_file_size / (1024 * 1024):.1f}MB)"

    def _validate_file(self, path: Path) -> Optional[str]:
        """Validate resume file. Returns error message if invalid, None if valid."""
        if not path.exists():
            return f"File does not exist: {path}"

        if not path.is_file():
            return f"Path is not a file: {path}"

        if path.suffix.lower() not in self.SUPPORTED_EXTENSIONS:
            return self._unsupported_message(path.suffix.lower())

        file_size = path.stat().st_size
        if file_size > self.max_file_size:
            return self._too_large_message(file_size)

        if file_size == 0:
            return "File is empty"

        return None

    def _extract_pdf_text(self, content: bytes):
        """Extract text from PDF bytes using PyPDF2. Returns (text, page count)."""
        reader = PyPDF2.PdfReader(io.BytesIO(content))
        text_content = []

        for page_num, page in enumerate(reader.pages):
            try:
                page_text = page.extract_text() or ""
            except Exception as e:
                console.print(f"[yellow]Warning: Could not extract text from page {page_num + 1}: {e}[/yellow]")
                continue
            if page_text.strip():
                text_content.append(page_text)

        return self.clean_text('\n\n'.join(text_content)), len(reader.pages)

    def _extract_docx_text(self, content: bytes) -> str:
        """Extract paragraphs and table rows from DOCX bytes using python-docx."""
        doc = Document(io.BytesIO(content))
        text_content = [paragraph.text.strip() for paragraph in doc.paragraphs]

        for table in doc.tables:
            for row in table.rows:
                cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
                if cells:
                    text_content.append(' | '.join(cells))

        return self.clean_text('\n'.join(text_content))

    def _extract_text_file(self, content: bytes):
        """Decode plain text or Markdown. Returns (text, encoding used)."""
        for encoding in TEXT_ENCODINGS:
            try:
                return self.clean_text(content.decode(encoding)), encoding
            except UnicodeDecodeError:
                continue

        raise ValueError("Could not decode file with any supported encoding")

    @staticmethod
    def clean_text(text: str) -> str:
        """Normalize whitespace and PDF artifacts while keeping line structure."""
        text = text.replace('\r\n', '\n').replace('\r', '\n')

        # Broken phone numbers like "407 -608-2358"
        text = re.sub(r'(\d+)[ \t]+(-\d+)', r'\1\2', text)
        # Broken email domains like "name@host .com"
        text = re.sub(r'(\w+@[\w.-]+)[ \t]+(\.(?:com|org|net|edu|gov|au)\b)', r'\1\2', text)
        # Spaces before punctuation
        text = re.sub(r'[ \t]+([.,;:!?])', r'\1', text)

        lines = [' '.join(line.split()) for line in text.split('\n')]
        cleaned = '\n'.join(lines)
        cleaned = re.sub(r'\n{3,}', '\n\n', cleaned)

        return cleaned.strip()

    def extract_resume_info(self, text: str) -> ResumeInfo:
        """Pull name, email, phone and upper-case sections out of resume text."""
        email_match = EMAIL_PATTERN.search(text)
        phone_match = PHONE_PATTERN.search(text)

        lines = [line.strip() for line in text.split('\n') if line.strip()]
        possible_name = lines[0] if lines else ""
        name = possible_name if possible_name and len(possible_name) < 50 and '@' not in possible_name else "Resume User"

        return ResumeInfo(
            name=name,
            email=email_match.group(0) if email_match else None,
            phone=phone_match.group(0).strip() if phone_match else None,
            sections=self.split_sections(text),
            full_text=text,
        )

    @staticmethod
    def split_sections(text: str) -> Dict[str, str]:
        """Map each upper-case header to the text beneath it."""
        sections: Dict[str, str] = {}
        current = None
        body = []

        for line in text.split('\n'):
            header = SECTION_HEADER_PATTERN.match(line.strip())
            if header:
                if current is not None:
                    sections[current] = '\n'.join(body).strip()
                current = header.group(1).strip()
                body = []
            elif current is not None:
                body.append(line)

        if current is not None:
            sections[current] = '\n'.join(body).strip()

        return sections

    def get_file_info(self, file_path: Union[str, Path]) -> Dict[str, Any]:
        """Get basic file information without processing."""
        path = Path(file_path)

        if not path.exists():
            return {"error": "File not found"}

        stat = path.stat()
        return {
            "name": path.name,
            "size": stat.st_size,
            "size_mb": round(stat.st_size / (1024 * 1024), 2),
            "extension": path.suffix.lower(),
            "supported": path.suffix.lower() in self.SUPPORTED_EXTENSIONS,
            "too_large": stat.st_size > self.max_file_size
        }

    @staticmethod
    def get_preview(text: str, max_length: int = 500) -> str:
        """Shorten text to roughly max_length, breaking at a sentence or line end."""
        if len(text) <= max_length:
            return text

        preview = text[:max_length]
        break_point = max(preview.rfind('.'), preview.rfind('\n'))
        if break_point > max_length * 0.7:
            preview = text[:break_point + 1]

        return preview.rstrip() + "..."


def get_resume_parser() -> ResumeParser:
    """Get a resume parser instance."""
    return ResumeParser()


def load_text(path: Union[str, Path]) -> str:
    """
    Read resume or job description text from a file.

    Raises:
        ValueError: If the document cannot be parsed
    """
    result = get_resume_parser().parse_file(path)
    if not result.success:
        raise ValueError(result.error)
    return result.text
