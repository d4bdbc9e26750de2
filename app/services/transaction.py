from marshmallow import ValidationError
from datetime import datetime
from app.services.common import (
    fetch_user_resources,
    filter_by_uuid_param,
    parse_bool_param,
)
from app.extensions import db
from app.models.transaction import Transaction
from app.utils.logger import logger


def _parse_date_param(query_params, name):
    try:
        return datetime.strptime(query_params[name], "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"Invalid {name} format: {query_params[name]}")


def get_user_transactions(user, query_params=None):
    """
    Get transactions for a user with optional filters

    Args:
        user: The user requesting transactions
        query_params: Dict with optional filters (account_id, category_id,
            is_recurring, from_date, to_date)

    Returns:
        SQLAlchemy query object with appropriate filters, newest first
    """
    logger.info(f"Getting transactions for user {user.id} with filters: {query_params}")

    query_params = query_params or {}

    query = fetch_user_resources(Transaction, user)

    query = filter_by_uuid_param(
        query, Transaction.account_id, query_params, "account_id"
    )
    query = filter_by_uuid_param(
        query, Transaction.category_id, query_params, "category_id"
    )

    if query_params.get("is_recurring"):
        is_recurring = parse_bool_param(query_params["is_recurring"], "is_recurring")
        query = query.filter(Transaction.is_recurring == is_recurring)

    if query_params.get("from_date"):
        query = query.filter(Transaction.date >= _parse_date_param(query_params, "from_date"))

    if query_params.get("to_date"):
        query = query.filter(Transaction.date <= _parse_date_param(query_params, "to_date"))

    query = query.order_by(Transaction.date.desc(), Transaction.created_at.desc())

    logger.debug("Transaction query built successfully")
    return query


def create_transaction(transaction, user):
    """create a transaction"""

    try:
        transaction.user_id = user.id
        transaction.is_recurring = False

        db.session.add(transaction)
        db.session.commit()

        logger.info(f"Created transaction {transaction.id} for user {user.id}")
        return transaction

    except Exception as e:
        db.session.rollback()
        logger.error(f"Error creating transaction: {e}")
        return {"error": f"Error creating transaction {str(e)}"}, 500


def delete_transaction(transaction):
    """Delete a transaction. A recurring rule never re-creates it."""
    try:
        db.session.delete(transaction)
        db.session.commit()

        logger.info(f"Deleted transaction {transaction.id}")
        return None

    except Exception as e:
        db.session.rollback()
        logger.error(f"Error deleting transaction: {e}")
        return {"error": f"Error deleting transaction {str(e)}"}, 500
