"""
Per-event sales rules

An order may only be placed while "now" sits inside the event's sale window
and falls on one of its allowed weekdays (ISO numbering, Monday=1 .. Sunday=7).
Window is checked first; either rule failing rejects the purchase.
"""

from datetime import datetime, tzinfo
from typing import Sequence

import attrs

from src.platform.exception.exceptions import DomainError, ForbiddenError


@attrs.define
class OrderRuleRangeDate:
    event_id: str
    start_date: datetime
    end_date: datetime

    def check(self, now: datetime) -> None:
        if now < self.start_date:
            raise ForbiddenError('ticket sales are not yet open')
        if now > self.end_date:
            raise ForbiddenError('ticket sales are already closed')


@attrs.define
class OrderRuleDay:
    event_id: str
    day: int = attrs.field()

    @day.validator
    def _check_day(self, attribute: attrs.Attribute, value: int) -> None:
        if not 1 <= value <= 7:
            raise DomainError(f'order rule day must be between 1 and 7, got {value}')


def check_rule_day(now: datetime, days: Sequence[OrderRuleDay], tz: tzinfo) -> None:
    # An empty list matches no weekday, so sales stay closed
    weekday = now.astimezone(tz).isoweekday()
    if not any(rule.day == weekday for rule in days):
        raise ForbiddenError('ticket sales are temporary closed for today')


def check_sales_rules(
    now: datetime,
    *,
    range_date: OrderRuleRangeDate,
    days: Sequence[OrderRuleDay],
    tz: tzinfo,
) -> None:
    range_date.check(now)
    check_rule_day(now, days, tz)
