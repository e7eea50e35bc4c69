"""
File I/O service for reading and writing files safely.

Handles:
- Existence checks
- Encoding detection
- Splitting content into rows
- JSON serialization of results
- Atomic writes
"""

from __future__ import annotations

import json
import logging
import os
import stat
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import chardet

from comparerows.core.compare.normalizer import split_lines


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


@dataclass
class ReadResult:
    """Result of a file read operation."""
    success: bool
    data: bytes = b''
    text: str = ''
    encoding: Optional[str] = None
    error: Optional[str] = None


@dataclass
class WriteResult:
    """Result of a file write operation."""
    success: bool
    bytes_written: int = 0
    error: Optional[str] = None


class FileIOService:
    """Service for safe file I/O operations."""

    def __init__(
        self,
        default_encoding: str = 'utf-8',
        fallback_encoding: str = 'latin-1',
        line_separator: str = os.linesep
    ):
        self.default_encoding = default_encoding
        self.fallback_encoding = fallback_encoding
        self.line_separator = line_separator

    def exists(self, path: Path | str) -> bool:
        """Check if a file or folder exists."""
        return Path(path or '').resolve().exists()

    def read(self, path: Path | str, encoding: Optional[str] = None) -> ReadResult:
        """
        Read a file and decode its content.

        Args:
            path: Path to the file
            encoding: Force specific encoding (auto-detect if None)

        Returns:
            ReadResult with raw bytes and decoded text, or error information
        """
        path = Path(path or '').resolve()

        try:
            raw_content = path.read_bytes()
        except PermissionError:
            return ReadResult(success=False, error=f"Permission denied: {path}")
        except OSError as e:
            return ReadResult(success=False, error=f"OS error: {e}")

        detected_encoding = encoding or self._detect_encoding(raw_content)

        # BOM overrides detection
        if raw_content.startswith(b'\xef\xbb\xbf'):
            detected_encoding = 'utf-8-sig'
        elif raw_content.startswith(b'\xff\xfe'):
            detected_encoding = 'utf-16'
        elif raw_content.startswith(b'\xfe\xff'):
            detected_encoding = 'utf-16'

        try:
            text = raw_content.decode(detected_encoding)
        except (UnicodeDecodeError, LookupError):
            text = raw_content.decode(self.fallback_encoding, errors='replace')
            detected_encoding = self.fallback_encoding

        return ReadResult(
            success=True,
            data=raw_content,
            text=text,
            encoding=detected_encoding
        )

    def read_text(self, path: Path | str, encoding: Optional[str] = None) -> str:
        """
        Read decoded file content.

        A failed read yields empty content instead of an error.
        """
        result = self.read(path, encoding=encoding)
        if not result.success:
            logging.warning(f"FileIOService - Treating {path} as empty: {result.error}")
            return ''
        return result.text

    def read_lines(self, path: Path | str, encoding: Optional[str] = None) -> list[str]:
        """Read the non-blank rows of a file."""
        return split_lines(self.read_text(path, encoding=encoding), self.line_separator)

    def write(
        self,
        path: Path | str,
        content: Any,
        append: bool = False,
        append_sep: str = '\n',
        encoding: str = 'utf-8'
    ) -> WriteResult:
        """
        Create or update a file.

        Args:
            path: Path to write to
            content: String, bytes, or any JSON-serializable value
            append: Append rather than override
            append_sep: Separator written after appended content
            encoding: Encoding used for text content

        Returns:
            WriteResult with success status
        """
        path = Path(path or '').resolve()
        if path.is_dir():
            return WriteResult(success=False, error=f"Is a directory: {path}")

        encoded = self._encode(content, encoding)
        if append:
            encoded += append_sep.encode(encoding)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)

            if append:
                with open(path, 'ab') as f:
                    f.write(encoded)
            else:
                self._write_atomic(path, encoded)

            logging.debug(f"FileIOService - Wrote {len(encoded)} bytes to {path}")
            return WriteResult(success=True, bytes_written=len(encoded))

        except PermissionError:
            return WriteResult(success=False, error=f"Permission denied: {path}")
        except OSError as e:
            return WriteResult(success=False, error=f"OS error: {e}")

    def _encode(self, content: Any, encoding: str) -> bytes:
        """Convert content to bytes, serializing non-text values as JSON."""
        if isinstance(content, bytes):
            return content
        if content is None:
            content = ''
        if not isinstance(content, str):
            content = json.dumps(content, indent=2, ensure_ascii=False)
        return content.encode(encoding)

    def _write_atomic(self, path: Path, encoded: bytes) -> None:
        """
        Write to a temporary file then move it into place.

        An overwritten file keeps its mode; a new file gets the umask default.
        """
        if path.exists():
            mode = stat.S_IMODE(path.stat().st_mode)
        else:
            mode = 0o666 & ~_current_umask()

        fd, temp_path = tempfile.mkstemp(dir=path.parent)
        try:
            os.write(fd, encoded)
            os.close(fd)
            fd = None
            os.chmod(temp_path, mode)
            os.replace(temp_path, path)
        except Exception:
            if fd is not None:
                os.close(fd)
            if os.path.exists(temp_path):
                os.unlink(temp_path)
            raise

    def _detect_encoding(self, content: bytes) -> str:
        """Detect encoding of content."""
        if not content:
            return self.default_encoding

        result = chardet.detect(content)

        if result['confidence'] > 0.7 and result['encoding']:
            encoding = result['encoding'].lower()
            if encoding == 'ascii':
                return 'utf-8'  # ASCII is subset of UTF-8
            return encoding

        return self.default_encoding
