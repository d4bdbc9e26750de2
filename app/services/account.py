from app.extensions import db
from app.models.account import Account
from app.services.common import fetch_user_resources
from app.utils.logger import logger


def get_user_accounts(user):
    """Accounts of a user, ordered by name"""
    query = fetch_user_resources(Account, user)
    return query.order_by(Account.name)


def create_account(account, user):
    """Create an account for the user"""
    try:
        account.user_id = user.id

        db.session.add(account)
        db.session.commit()

        logger.info(f"Created account {account.id} for user {user.id}")
        return account

    except Exception as e:
        db.session.rollback()
        logger.error(f"Error creating account: {str(e)}")
        return {"error": f"Failed to create account: {str(e)}"}, 500


def update_account(account):
    try:
        db.session.commit()
        logger.info(f"Updated account {account.id}")
        return account

    except Exception as e:
        db.session.rollback()
        logger.error(f"Error updating account: {str(e)}")
        return {"error": f"Failed to update account: {str(e)}"}, 500


def delete_account(account):
    """Delete an account together with its transactions and recurring rules"""
    try:
        db.session.delete(account)
        db.session.commit()
        logger.info(f"Deleted account {account.id}")
        return None

    except Exception as e:
        db.session.rollback()
        logger.error(f"Error deleting account: {str(e)}")
        return {"error": f"Failed to delete account: {str(e)}"}, 500
