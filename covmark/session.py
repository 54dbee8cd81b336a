"""Apply / clear coverage annotations for one document.

Usage:
    session = CoverageSession("src/foo.c", on_change=renderer.redraw)
    session.apply()     # read foo.c + foo.c.cov, replace the annotation set
    session.clear()     # drop every annotation

``on_change`` receives the full new annotation list after every apply or
clear; the renderer is expected to discard its previous decorations.
"""

import warnings
from typing import Callable

from covmark.models import Annotation
from covmark.resolver import annotate
from covmark.source import (
    DEFAULT_ENCODING,
    DEFAULT_SUFFIX,
    CoverageFileNotFoundError,
    CoverageWarning,
    SourceReadError,
    coverage_path_for,
    read_coverage_file,
    read_document,
)


class CoverageSession:
    """Holds the annotation set currently shown for a document."""

    def __init__(
        self,
        document_path,
        suffix: str = DEFAULT_SUFFIX,
        encoding: str = DEFAULT_ENCODING,
        on_change: Callable[[list[Annotation]], None] | None = None,
        coverage_path=None,
    ) -> None:
        self.document_path = document_path
        self.coverage_path = coverage_path or coverage_path_for(document_path, suffix)
        self._encoding = encoding
        self._on_change = on_change
        self._annotations: list[Annotation] = []

    @property
    def annotations(self) -> list[Annotation]:
        return list(self._annotations)

    def apply(self) -> list[Annotation]:
        """Re-read the coverage file and replace the current annotations.

        A missing or unreadable coverage file emits a CoverageWarning and keeps
        the previous annotations. A missing document still raises
        DocumentNotFoundError.
        """
        document = read_document(self.document_path, self._encoding)
        try:
            text = read_coverage_file(self.coverage_path, self._encoding)
        except (CoverageFileNotFoundError, SourceReadError) as exc:
            warnings.warn(str(exc), CoverageWarning, stacklevel=2)
            return self.annotations

        self._replace(annotate(text, len(document)))
        return self.annotations

    def clear(self) -> None:
        self._replace([])

    def _replace(self, annotations: list[Annotation]) -> None:
        self._annotations = annotations
        if self._on_change is not None:
            self._on_change(self.annotations)
