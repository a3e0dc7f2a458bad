"""
Formatting utilities for delivery estimates shown at checkout.

All functions return plain strings in Thai, with years in the Buddhist Era.
"""

from datetime import date

from common.config import CURRENCY
from common.types import DeliveryWindow

# Indexed by date.weekday() (Monday == 0)
THAI_WEEKDAYS = [
    "วันจันทร์",
    "วันอังคาร",
    "วันพุธ",
    "วันพฤหัสบดี",
    "วันศุกร์",
    "วันเสาร์",
    "วันอาทิตย์",
]

THAI_MONTHS = [
    "มกราคม",
    "กุมภาพันธ์",
    "มีนาคม",
    "เมษายน",
    "พฤษภาคม",
    "มิถุนายน",
    "กรกฎาคม",
    "สิงหาคม",
    "กันยายน",
    "ตุลาคม",
    "พฤศจิกายน",
    "ธันวาคม",
]

BUDDHIST_ERA_OFFSET = 543


def format_thai_date(value: date) -> str:
    """
    Format a date in Thai with the day of week.

    Example output:
        วันจันทร์ที่ 28 เมษายน 2568
    """
    weekday = THAI_WEEKDAYS[value.weekday()]
    month = THAI_MONTHS[value.month - 1]
    return f"{weekday}ที่ {value.day} {month} {value.year + BUDDHIST_ERA_OFFSET}"


def format_delivery_window(window: DeliveryWindow) -> dict[str, str]:
    """Format a delivery window as min/max dates plus a day-count label."""
    return {
        "min_date": format_thai_date(window.min_date),
        "max_date": format_thai_date(window.max_date),
        "days": window.days_text,
    }


def format_fee(fee: int | None) -> str:
    """Render a fee in minor units as major units, or a dash when unknown."""
    if fee is None:
        return "-"
    return f"{fee / 100:,.2f} {CURRENCY.upper()}"
