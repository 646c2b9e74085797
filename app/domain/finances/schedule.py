"""
Calendar arithmetic for recurring transaction templates.

Pure functions: given a template (or its raw schedule fields), decide
whether it is due and compute its following execution date. Month and
year steps clamp to the last valid day of the target month, so an
anchor of 31 lands on 30 April or 28/29 February instead of spilling
into the next month.
"""

from dataclasses import replace
from datetime import date, timedelta
from typing import Optional

from dateutil.relativedelta import relativedelta

from app.domain.finances.entities import Frequency, RecurringTransaction
from app.domain.finances.errors import InvalidScheduleError

MIN_DAY_OF_MONTH = 1
MAX_DAY_OF_MONTH = 31


def advance(
    current: date, frequency: Frequency, day_of_month: Optional[int] = None
) -> date:
    """Return the occurrence that follows `current`.

    Args:
        current: The occurrence just executed.
        frequency: Template frequency.
        day_of_month: Optional monthly anchor (1-31).

    Returns:
        The next calendar date, always strictly after `current`.

    Raises:
        InvalidScheduleError: If the anchor is outside 1-31.
    """
    if frequency is Frequency.DAILY:
        return current + timedelta(days=1)
    if frequency is Frequency.WEEKLY:
        return current + timedelta(days=7)
    if frequency is Frequency.MONTHLY:
        if day_of_month is None:
            return current + relativedelta(months=1)
        if not (MIN_DAY_OF_MONTH <= day_of_month <= MAX_DAY_OF_MONTH):
            raise InvalidScheduleError(f"day_of_month out of range: {day_of_month}")
        # relativedelta clamps an absolute day to the month's length
        return current + relativedelta(months=1, day=day_of_month)
    if frequency is Frequency.YEARLY:
        return current + relativedelta(years=1)
    raise InvalidScheduleError(f"Unsupported frequency: {frequency}")


def next_execution_date(template: RecurringTransaction) -> date:
    """Return the date the template should fire after its current one."""
    return advance(
        template.next_execution_date, template.frequency, template.day_of_month
    )


def has_ended(template: RecurringTransaction) -> bool:
    """True once the next occurrence falls after the template's end date."""
    return (
        template.end_date is not None
        and template.next_execution_date > template.end_date
    )


def is_due(template: RecurringTransaction, today: date) -> bool:
    """True if the template must be executed on or before `today`."""
    return (
        template.is_active
        and template.next_execution_date <= today
        and not has_ended(template)
    )


def advanced(template: RecurringTransaction) -> RecurringTransaction:
    """Return a copy of the template moved to its following occurrence."""
    return replace(template, next_execution_date=next_execution_date(template))
