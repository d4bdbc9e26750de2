from dateutil.relativedelta import relativedelta
from datetime import timedelta
from marshmallow import ValidationError

from app.extensions import db
from app.models.recurring_rule import RecurringRule
from app.models.transaction import Transaction
from app.services.common import (
    fetch_user_resources,
    filter_by_uuid_param,
    parse_bool_param,
)
from app.utils.enums import Frequency
from app.utils.logger import logger


FREQUENCY_STEPS = {
    Frequency.DAILY: timedelta(days=1),
    Frequency.WEEKLY: timedelta(weeks=1),
    Frequency.BIWEEKLY: timedelta(weeks=2),
    Frequency.MONTHLY: relativedelta(months=1),
    Frequency.YEARLY: relativedelta(years=1),
}


def advance_due_date(current_date, frequency):
    """
    Return the occurrence that follows current_date for the given frequency.

    Monthly and yearly steps are calendar steps: the day of month is kept and
    clamped to the last day of shorter months (Jan 31 -> Feb 28, and Feb 29
    -> Feb 28 in a non-leap year).

    Args:
        current_date: date of the current occurrence
        frequency: Frequency member or its raw string value

    Returns:
        date: next occurrence. Unknown frequencies advance monthly.
    """
    if not isinstance(frequency, Frequency):
        try:
            frequency = Frequency(str(frequency).upper())
        except ValueError:
            logger.warning(
                f"Unknown recurring frequency {frequency!r}, advancing monthly"
            )
            frequency = Frequency.MONTHLY

    return current_date + FREQUENCY_STEPS[frequency]


def upcoming_due_dates(recurring_rule, count):
    """Project the next `count` occurrences, starting at the rule's cursor"""
    due_dates = []
    due_date = recurring_rule.next_due_date

    for _ in range(count):
        due_dates.append(due_date)
        due_date = advance_due_date(due_date, recurring_rule.frequency)

    return due_dates


def get_user_recurring_rules(user, query_params=None):
    """
    Get recurring rules of a user.

    Args:
        user: The user requesting recurring rules
        query_params: Dict with optional filters:
            - account_id: Filter by specific account
            - category_id: Filter by specific category
            - frequency: Filter by frequency
            - active: Filter by paused/active state
    """
    if query_params is None:
        query_params = {}

    query = fetch_user_resources(RecurringRule, user)

    query = filter_by_uuid_param(
        query, RecurringRule.account_id, query_params, "account_id"
    )
    query = filter_by_uuid_param(
        query, RecurringRule.category_id, query_params, "category_id"
    )

    if query_params.get("frequency"):
        try:
            frequency = Frequency(query_params["frequency"])
        except ValueError:
            raise ValidationError(f"Invalid frequency: {query_params['frequency']}")
        query = query.filter(RecurringRule.frequency == frequency)

    if query_params.get("active"):
        active = parse_bool_param(query_params["active"], "active")
        query = query.filter(RecurringRule.active == active)

    # Order by next due date
    query = query.order_by(RecurringRule.next_due_date, RecurringRule.created_at)

    logger.debug("Recurring rule query built successfully")
    return query


def create_recurring_rule(recurring_rule, user):
    """
    Create a new recurring rule. The cursor starts at the start date so the
    first occurrence is the start date itself.

    Returns:
        The created RecurringRule or error tuple
    """
    try:
        recurring_rule.user_id = user.id
        recurring_rule.next_due_date = recurring_rule.start_date
        recurring_rule.active = True

        db.session.add(recurring_rule)
        db.session.commit()

        logger.info(f"Created recurring rule: {recurring_rule.id}")
        return recurring_rule

    except Exception as e:
        db.session.rollback()
        logger.error(f"Error creating recurring rule: {str(e)}")
        return {"error": f"Failed to create recurring rule: {str(e)}"}, 500


def update_recurring_rule(recurring_rule, update_data):
    """
    Persist an edit of a recurring rule (amount, description, pause/resume).

    Returns:
        Updated RecurringRule or error tuple
    """
    try:
        if "active" in update_data:
            state = "resumed" if recurring_rule.active else "paused"
            logger.info(f"Recurring rule {recurring_rule.id} {state}")

        db.session.commit()

        logger.info(f"Updated recurring rule: {recurring_rule.id}")
        return recurring_rule

    except Exception as e:
        db.session.rollback()
        logger.error(f"Error updating recurring rule: {str(e)}")
        return {"error": f"Failed to update recurring rule: {str(e)}"}, 500


def delete_recurring_rule(recurring_rule):
    """
    Delete a recurring rule. Transactions it already generated are kept and
    lose their back-reference.
    """
    try:
        detached = Transaction.query.filter(
            Transaction.recurring_rule_id == recurring_rule.id
        ).update({"recurring_rule_id": None}, synchronize_session=False)

        db.session.delete(recurring_rule)
        db.session.commit()

        logger.info(
            f"Deleted recurring rule {recurring_rule.id}, kept {detached} generated transactions"
        )
        return None

    except Exception as e:
        db.session.rollback()
        logger.error(f"Error deleting recurring rule: {str(e)}")
        return {"error": f"Failed to delete recurring rule: {str(e)}"}, 500
