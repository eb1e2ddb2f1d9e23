"""Date manipulation utilities"""

import calendar
from datetime import date
from typing import Tuple


def month_bounds(day: date) -> Tuple[date, date]:
    """First and last calendar day (inclusive) of the month containing `day`"""
    last_day = calendar.monthrange(day.year, day.month)[1]
    return day.replace(day=1), day.replace(day=last_day)
