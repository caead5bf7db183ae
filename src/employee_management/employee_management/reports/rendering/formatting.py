from __future__ import annotations

from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import Optional


def money(value: Decimal | float) -> str:
    """Currency text, e.g. `$85,000.00` (negative values as `-$12.50`)."""
    amount = Decimal(str(value)).quantize(Decimal("0.01"))
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def ymd(value: Optional[date]) -> str:
    return value.strftime("%Y-%m-%d") if value else ""


def timestamp(value: Optional[datetime]) -> str:
    return value.strftime("%Y-%m-%d %H:%M:%S") if value else ""


def clock_time(value: Optional[datetime], *, seconds: bool = True) -> str:
    if value is None:
        return ""
    return value.strftime("%H:%M:%S" if seconds else "%H:%M")


def hours_minutes(value: Optional[timedelta]) -> Optional[str]:
    if value is None:
        return None
    minutes = int(value.total_seconds()) // 60
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def generated_on(moment: datetime) -> str:
    return f"Generated on: {timestamp(moment)}"
