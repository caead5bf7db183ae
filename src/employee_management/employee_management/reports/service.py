from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from ..core.enums import ReportFormat, ReportSubject
from ..core.exceptions import ReportNotImplementedError
from .base import ReportGenerator, ReportQuery
from .cache import ReportCache
from .registry import index_generators


@dataclass(frozen=True)
class ReportFile:
    content: bytes
    content_type: str
    filename: str


class ReportService:
    """Dispatches (subject, format) to a registered generator through the cache."""

    def __init__(self, generators: Iterable[ReportGenerator], cache: ReportCache):
        self._generators = index_generators(generators)
        self._cache = cache

    def generate(
        self, subject: ReportSubject, report_format: ReportFormat, query: Optional[ReportQuery] = None
    ) -> ReportFile:
        generator = self._generators.get((subject, report_format))
        if generator is None:
            raise ReportNotImplementedError(
                f"No {report_format.value} generator registered for report '{subject.value}'"
            )

        query = query or ReportQuery()
        content = self._cache.get_or_create(generator.cache_key(query), lambda: generator.generate(query))
        return ReportFile(
            content=content,
            content_type=generator.content_type,
            filename=f"{subject.value}.{generator.file_extension}",
        )
