from decimal import Decimal

from marshmallow import ValidationError

from app.extensions import db
from app.models.goal import Goal
from app.services.common import fetch_user_resources, parse_bool_param
from app.utils.logger import logger


def get_user_goals(user, query_params=None):
    """
    Get goals of a user, pinned goal first, then newest first.

    Args:
        user: The user requesting goals
        query_params: Dict with optional filters:
            - completed: 'true' for reached goals, 'false' for the others
    """
    if query_params is None:
        query_params = {}

    query = fetch_user_resources(Goal, user)

    if query_params.get("completed"):
        completed = parse_bool_param(query_params["completed"], "completed")
        if completed:
            query = query.filter(Goal.current_amount >= Goal.target_amount)
        else:
            query = query.filter(Goal.current_amount < Goal.target_amount)

    return query.order_by(Goal.is_pinned.desc(), Goal.created_at.desc())


def featured_goal(user):
    """
    The goal shown on the dashboard: the pinned one, otherwise the unfinished
    goal closest to its target, otherwise the newest goal. None without goals.
    """
    goals = fetch_user_resources(Goal, user).order_by(Goal.created_at.desc()).all()
    if not goals:
        return None

    for goal in goals:
        if goal.is_pinned:
            return goal

    active = [goal for goal in goals if not goal.is_completed]
    if active:
        return max(active, key=lambda goal: goal.progress)

    return goals[0]


def create_goal(goal, user):
    """Create a goal; the saved amount always starts at zero"""
    try:
        goal.user_id = user.id
        goal.current_amount = Decimal("0.00")
        goal.is_pinned = False

        db.session.add(goal)
        db.session.commit()

        logger.info(f"Created goal: {goal.id}")
        return goal

    except Exception as e:
        db.session.rollback()
        logger.error(f"Error creating goal: {str(e)}")
        return {"error": f"Failed to create goal: {str(e)}"}, 500


def update_goal(goal):
    try:
        db.session.commit()

        logger.info(f"Updated goal: {goal.id}")
        return goal

    except Exception as e:
        db.session.rollback()
        logger.error(f"Error updating goal: {str(e)}")
        return {"error": f"Failed to update goal: {str(e)}"}, 500


def contribute_to_goal(goal, amount):
    """
    Deposit into (positive amount) or withdraw from (negative amount) a goal.

    Raises:
        ValidationError: when a withdrawal exceeds the saved amount
    """
    new_amount = Decimal(str(goal.current_amount or 0)) + amount
    if new_amount < 0:
        raise ValidationError(
            f"Cannot withdraw more than the saved amount ({goal.current_amount})",
            "amount",
        )

    try:
        goal.current_amount = new_amount
        db.session.commit()

        action = "Deposited" if amount > 0 else "Withdrew"
        logger.info(f"{action} {abs(amount)} on goal {goal.id}, saved {new_amount}")
        return goal

    except Exception as e:
        db.session.rollback()
        logger.error(f"Error updating goal amount: {str(e)}")
        return {"error": f"Failed to update goal amount: {str(e)}"}, 500


def pin_goal(goal, pinned=True):
    """Pin a goal, unpinning every other goal of its owner, or unpin it"""
    try:
        if pinned:
            Goal.query.filter(
                Goal.user_id == goal.user_id,
                Goal.id != goal.id,
                Goal.is_pinned.is_(True),
            ).update({"is_pinned": False}, synchronize_session=False)

        goal.is_pinned = pinned
        db.session.commit()

        logger.info(f"Goal {goal.id} {'pinned' if pinned else 'unpinned'}")
        return goal

    except Exception as e:
        db.session.rollback()
        logger.error(f"Error pinning goal: {str(e)}")
        return {"error": f"Failed to pin goal: {str(e)}"}, 500


def delete_goal(goal):
    try:
        db.session.delete(goal)
        db.session.commit()

        logger.info(f"Deleted goal {goal.id}")
        return None

    except Exception as e:
        db.session.rollback()
        logger.error(f"Error deleting goal: {str(e)}")
        return {"error": f"Failed to delete goal: {str(e)}"}, 500
