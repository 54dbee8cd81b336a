"""Locating and reading documents and their coverage record files.

Usage:
    path = coverage_path_for("src/foo.c", ".cov")   # -> Path("src/foo.c.cov")
    text = read_coverage("src/foo.c", ".cov")
    doc  = read_document("src/foo.c")

The coverage file of a document is the document path with a fixed suffix
appended.
"""

from pathlib import Path

DEFAULT_SUFFIX = ".cov"
DEFAULT_ENCODING = "utf-8"


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class CoverageSourceError(Exception):
    """Base exception for all source errors."""


class CoverageFileNotFoundError(CoverageSourceError):
    """Raised when a document has no coverage record file."""


class DocumentNotFoundError(CoverageSourceError):
    """Raised when the document itself does not exist."""


class SourceReadError(CoverageSourceError):
    """Raised when a file exists but cannot be read or decoded."""


class CoverageWarning(UserWarning):
    """Emitted when a coverage file is missing or unreadable; never fatal."""


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def coverage_path_for(document_path, suffix: str = DEFAULT_SUFFIX) -> Path:
    """Return the coverage record path for *document_path*."""
    document_path = Path(document_path)
    return document_path.with_name(document_path.name + suffix)


def read_document(path, encoding: str = DEFAULT_ENCODING) -> str:
    """Return the text of the document at *path*.

    Raises:
        DocumentNotFoundError: the file does not exist
        SourceReadError:       the file cannot be read or decoded
    """
    path = Path(path)
    if not path.is_file():
        raise DocumentNotFoundError(f"Document not found: '{path}'")
    return _read_text(path, encoding)


def read_coverage(document_path, suffix: str = DEFAULT_SUFFIX,
                  encoding: str = DEFAULT_ENCODING) -> str:
    """Return the coverage record text belonging to *document_path*.

    Raises:
        CoverageFileNotFoundError: no coverage file next to the document
        SourceReadError:           the file cannot be read or decoded
    """
    return read_coverage_file(coverage_path_for(document_path, suffix), encoding)


def read_coverage_file(path, encoding: str = DEFAULT_ENCODING) -> str:
    """Read an explicitly located coverage record file."""
    path = Path(path)
    if not path.is_file():
        raise CoverageFileNotFoundError(f"Coverage file not found: '{path}'")
    return _read_text(path, encoding)


# ---------------------------------------------------------------------------
# Internal
# ---------------------------------------------------------------------------

def _read_text(path: Path, encoding: str) -> str:
    # newline="" keeps "\r\n" intact so character offsets match the file
    try:
        with path.open(encoding=encoding, newline="") as f:
            return f.read()
    except UnicodeDecodeError as exc:
        raise SourceReadError(
            f"Unable to decode '{path}' as {encoding}: {exc.reason}"
        ) from exc
    except OSError as exc:
        raise SourceReadError(f"Unable to read '{path}': {exc.strerror}") from exc
