"""
Goal Progress Tracker

NOTE: Time remaining uses a fixed 30-day month, unlike the calendar
months of the trend window. Both behaviours are kept as they are.
"""

import math
from datetime import date
from decimal import Decimal
from typing import Optional, Union

from src.core.money import parse_amount
from src.models.ledger import Goal
from src.models.results import DeadlineStatus, GoalProgress


DAYS_PER_MONTH = 30

NO_DEADLINE_TEXT = "No deadline set"
DEADLINE_PASSED_TEXT = "Deadline passed"


def progress_percentage(current: Decimal, target: Decimal) -> float:
    """current / target * 100, uncapped; 0 when the target is 0."""
    if target <= 0:
        return 0.0
    return float(current / target * 100)


def months_remaining(deadline: date, today: date) -> int:
    """Whole 30-day months left, rounded up. Zero or less means passed."""
    days = (deadline - today).days
    return math.ceil(days / DAYS_PER_MONTH)


def time_remaining(deadline: Optional[date], today: date) -> str:
    if deadline is None:
        return NO_DEADLINE_TEXT
    
    months = months_remaining(deadline, today)
    if months <= 0:
        return DEADLINE_PASSED_TEXT
    if months == 1:
        return "1 month remaining"
    return f"{months} months remaining"


def goal_progress(goal: Goal, today: date) -> GoalProgress:
    percentage = progress_percentage(goal.current_amount, goal.target_amount)
    
    if goal.deadline is None:
        months = None
        status = DeadlineStatus.NO_DEADLINE
    else:
        months = months_remaining(goal.deadline, today)
        status = DeadlineStatus.ACTIVE if months > 0 else DeadlineStatus.PASSED
    
    return GoalProgress(
        goal_id=goal.id,
        title=goal.title,
        current_amount=goal.current_amount,
        target_amount=goal.target_amount,
        percentage=percentage,
        display_percentage=min(100.0, percentage),
        months_remaining=months,
        deadline_status=status,
        time_remaining=time_remaining(goal.deadline, today),
    )


def add_to_goal(goal: Goal, amount: Union[str, int, float, Decimal]) -> Goal:
    """
    Return a copy of `goal` with `amount` added to its current amount.
    
    Raises:
        InvalidAmount: if `amount` is not a non-negative decimal
    """
    added = parse_amount(amount)
    return goal.model_copy(update={"current_amount": goal.current_amount + added})
