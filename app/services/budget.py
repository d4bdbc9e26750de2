from datetime import date

from marshmallow import ValidationError

from app.extensions import db
from app.models.budget import Budget
from app.services.common import fetch_user_resources, filter_by_uuid_param
from app.utils.constants import BUDGET_SUMMARY_LIMIT
from app.utils.logger import logger


def get_user_budgets(user, query_params=None):
    """
    Get budgets of a user.

    Args:
        user: The user requesting budgets
        query_params: Dict with optional filters:
            - category_id: Filter by specific category
            - month: Filter by month (1-12), requires year
            - year: Filter by year
    """
    if query_params is None:
        query_params = {}

    query = fetch_user_resources(Budget, user)

    query = filter_by_uuid_param(query, Budget.category_id, query_params, "category_id")

    if query_params.get("month"):
        if not query_params.get("year"):
            raise ValidationError(
                "Filtering by month requires specifying a year as well."
            )

        try:
            month = int(query_params["month"])
            year = int(query_params["year"])
        except (ValueError, TypeError):
            logger.warning(f"Invalid month/year parameters: {query_params}")
            raise ValidationError("Invalid month or year format.")

        if not 1 <= month <= 12:
            raise ValidationError("Month must be between 1 and 12")

        query = query.filter(Budget.month == month, Budget.year == year)

    elif query_params.get("year"):
        try:
            year = int(query_params["year"])
        except (ValueError, TypeError):
            logger.warning(f"Invalid year parameter: {query_params['year']}")
            raise ValidationError("Invalid year format.")

        query = query.filter(Budget.year == year)

    # Latest month first
    query = query.order_by(
        Budget.year.desc(), Budget.month.desc(), Budget.created_at
    )

    return query


def budgets_at_risk(user, today=None, limit=BUDGET_SUMMARY_LIMIT):
    """Budgets of the current month, the most consumed first"""
    today = today or date.today()
    budgets = fetch_user_resources(Budget, user).filter(
        Budget.month == today.month, Budget.year == today.year
    )
    ranked = sorted(budgets, key=lambda budget: budget.usage_ratio, reverse=True)
    return ranked[:limit]


def create_budget(budget, user):
    """
    Create a new budget. Spending is not stored: it is summed from the
    category's transactions whenever the budget is read.
    """
    try:
        budget.user_id = user.id

        db.session.add(budget)
        db.session.commit()

        logger.info(
            f"Created budget {budget.id} for {budget.user_id}, {budget.category_id}, {budget.month}/{budget.year}"
        )
        return budget

    except Exception as e:
        db.session.rollback()
        logger.error(f"Error creating budget: {str(e)}")
        return {"error": f"Failed to create budget: {str(e)}"}, 500


def update_budget(budget):
    """Persist a new limit for a budget"""
    try:
        db.session.commit()

        logger.info(f"Updated budget {budget.id} amount to {budget.amount}")
        return budget

    except Exception as e:
        db.session.rollback()
        logger.error(f"Error updating budget: {str(e)}")
        return {"error": f"Failed to update budget: {str(e)}"}, 500


def delete_budget(budget):
    """Delete a budget. Transactions of its category are not touched."""
    try:
        db.session.delete(budget)
        db.session.commit()

        logger.info(f"Deleted budget {budget.id}")
        return None

    except Exception as e:
        db.session.rollback()
        logger.error(f"Error deleting budget: {str(e)}")
        return {"error": f"Failed to delete budget: {str(e)}"}, 500
