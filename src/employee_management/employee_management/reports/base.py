from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, ClassVar, Optional

from ..common.datetime_utils import now_local
from ..core.enums import ReportFormat, ReportSubject
from .repository import ReportRepository


@dataclass(frozen=True)
class ReportQuery:
    """Optional filters; each generator reads only the ones its subject supports."""

    start_date: Optional[date] = None
    end_date: Optional[date] = None
    employee_id: Optional[int] = None


class ReportGenerator(ABC):
    """One subject rendered in one format.

    Subclasses set `subject`, `format` and `cache_name`, and implement
    `generate`. Generators only read through the repository.
    """

    subject: ClassVar[ReportSubject]
    format: ClassVar[ReportFormat]
    cache_name: ClassVar[str]

    def __init__(self, reports: ReportRepository, *, clock: Callable[[], datetime] = now_local):
        self._reports = reports
        self._clock = clock

    @property
    def content_type(self) -> str:
        return self.format.content_type

    @property
    def file_extension(self) -> str:
        return self.format.file_extension

    def cache_key(self, query: ReportQuery) -> str:
        return f"{self.cache_name}_{self.format.value}{self.cache_suffix(query)}"

    def cache_suffix(self, query: ReportQuery) -> str:
        return ""

    @abstractmethod
    def generate(self, query: ReportQuery) -> bytes:
        raise NotImplementedError


class DateRangeMixin:
    """Cache suffix `_<start>_<end>` (YYYYMMDD, empty when a bound is missing)."""

    def cache_suffix(self, query: ReportQuery) -> str:
        start = query.start_date.strftime("%Y%m%d") if query.start_date else ""
        end = query.end_date.strftime("%Y%m%d") if query.end_date else ""
        return f"_{start}_{end}"


class EmployeeFilterMixin:
    def cache_suffix(self, query: ReportQuery) -> str:
        return f"_employee_{query.employee_id}" if query.employee_id is not None else ""
