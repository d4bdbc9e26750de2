from decimal import Decimal
from sqlalchemy import func

from app.extensions import db
from app.models.category import Category
from app.models.recurring_rule import RecurringRule
from app.models.transaction import Transaction
from app.services.account import get_user_accounts
from app.services.budget import budgets_at_risk
from app.services.category import ensure_default_categories
from app.services.goal import featured_goal
from app.services.recurring_payments import catch_up_recurring_payments
from app.services.transaction import get_user_transactions
from app.utils.constants import RECENT_TRANSACTIONS_LIMIT, UPCOMING_PAYMENTS_LIMIT
from app.utils.enums import CategoryType
from app.utils.logger import logger


def _totals_by_category_type(user):
    """Sum of absolute transaction amounts per category type"""
    rows = (
        db.session.query(Category.type, func.sum(func.abs(Transaction.amount)))
        .join(Category, Transaction.category_id == Category.id)
        .filter(Transaction.user_id == user.id)
        .group_by(Category.type)
        .all()
    )
    totals = {category_type: Decimal("0") for category_type in CategoryType}
    for category_type, total in rows:
        totals[category_type] = Decimal(str(total or 0))
    return totals


def get_dashboard(user, access_token):
    """
    Build the dashboard of a user.

    Recurring payments are caught up first so the transactions they create
    are part of the data returned by this same call.
    """
    ensure_default_categories(user)
    catch_up_recurring_payments(user, access_token)

    accounts = get_user_accounts(user).all()
    totals = _totals_by_category_type(user)

    recent_transactions = (
        get_user_transactions(user).limit(RECENT_TRANSACTIONS_LIMIT).all()
    )
    upcoming_payments = (
        RecurringRule.query.filter(
            RecurringRule.user_id == user.id, RecurringRule.active.is_(True)
        )
        .order_by(RecurringRule.next_due_date)
        .limit(UPCOMING_PAYMENTS_LIMIT)
        .all()
    )

    logger.info(f"Built dashboard for user {user.id}")
    return {
        "accounts": accounts,
        "total_balance": sum((account.balance for account in accounts), Decimal("0")),
        "total_income": totals[CategoryType.INCOME],
        "total_expenses": totals[CategoryType.EXPENSE],
        "recent_transactions": recent_transactions,
        "upcoming_payments": upcoming_payments,
        "budgets": budgets_at_risk(user),
        "goal": featured_goal(user),
    }
