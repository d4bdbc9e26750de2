"""
Catch-up processing of recurring payments.

Occurrences are not generated by a background job. Every time the user opens
the dashboard, each active rule whose cursor (next_due_date) is today or
earlier gets one transaction per missed occurrence, and the cursor moves past
today. A user who stays away for three months gets three monthly transactions
on the next visit.
"""

from contextlib import contextmanager
from datetime import date

from flask import current_app
from redis.exceptions import RedisError
from sqlalchemy.exc import SQLAlchemyError

from app.extensions import db, redis_client
from app.models.auth import ActiveAccessToken
from app.models.recurring_rule import RecurringRule
from app.models.transaction import Transaction
from app.services.recurring_rule import advance_due_date
from app.utils.constants import DEFAULT_RECURRING_DESCRIPTION, RECURRING_LOCK_KEY
from app.utils.exceptions import StorageError
from app.utils.logger import logger


def _storage_error(err):
    """Convert a SQLAlchemy error into a StorageError with the driver details"""
    orig = getattr(err, "orig", None)
    code = getattr(orig, "pgcode", None) or getattr(err, "code", None)
    message = str(orig) if orig is not None else str(err)
    return StorageError(message, code)


class RecurringRuleStore:
    """
    Storage used by the catch-up processor, scoped to one access token.

    Each write is committed on its own; nothing wraps an insert and the
    following cursor update in one database transaction.
    """

    def __init__(self, access_token=None, session=None):
        self.access_token = access_token
        self.session = session or db.session

    def get_session(self):
        """Return the live session row of the access token, or None"""
        if not self.access_token:
            return None
        return (
            self.session.query(ActiveAccessToken)
            .filter_by(access_token=self.access_token)
            .first()
        )

    def query_due_rules(self, user_id, as_of):
        try:
            return (
                self.session.query(RecurringRule)
                .filter(
                    RecurringRule.user_id == user_id,
                    RecurringRule.active.is_(True),
                    RecurringRule.next_due_date <= as_of,
                )
                .order_by(RecurringRule.next_due_date)
                .all()
            )
        except SQLAlchemyError as e:
            self.session.rollback()
            raise _storage_error(e)

    def insert_transaction(self, **fields):
        try:
            transaction = Transaction(**fields)
            self.session.add(transaction)
            self.session.commit()
            return transaction.id
        except SQLAlchemyError as e:
            self.session.rollback()
            raise _storage_error(e)

    def update_rule_next_due_date(self, rule_id, new_date):
        try:
            rule = self.session.get(RecurringRule, rule_id)
            if rule is None:
                raise StorageError(f"Recurring rule {rule_id} not found", "not_found")

            rule.next_due_date = new_date
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise _storage_error(e)


def _empty_result():
    return {"processed": 0, "errors": []}


def _catch_up_rule(store, rule, user_id, today, errors):
    """
    Materialize every occurrence of one rule up to today and persist the cursor.

    Returns True when the cursor was saved. An insert failure stops the rule at
    the failed occurrence; the occurrences inserted before it are kept and the
    cursor is saved pointing at the failed one.
    """
    due_date = rule.next_due_date

    while due_date <= today:
        try:
            store.insert_transaction(
                user_id=user_id,
                account_id=rule.account_id,
                category_id=rule.category_id,
                amount=rule.amount,
                description=rule.description or DEFAULT_RECURRING_DESCRIPTION,
                date=due_date,
                is_recurring=True,
                recurring_rule_id=rule.id,
            )
        except StorageError as e:
            errors.append(f"Error processing rule {rule.id}: {e.message}")
            break

        logger.debug(f"Materialized recurring rule {rule.id} occurrence {due_date}")
        due_date = advance_due_date(due_date, rule.frequency)

    try:
        store.update_rule_next_due_date(rule.id, due_date)
    except StorageError as e:
        errors.append(f"Error updating rule {rule.id}: {e.message}")
        return False

    return True


def reconcile(store, user_id, today=None):
    """
    Catch up every due recurring rule of a user.

    Args:
        store: RecurringRuleStore (or any object with the same methods)
        user_id: owner of the rules
        today: cutoff date, defaults to the server's local date

    Returns:
        dict: {"processed": number of rules whose cursor was saved,
               "errors": list of error messages}. Never raises.
    """
    if not user_id:
        return _empty_result()

    try:
        if not store.get_session():
            return _empty_result()

        today = today or date.today()

        try:
            due_rules = store.query_due_rules(user_id, today)
        except StorageError as e:
            if not e.has_content:
                return _empty_result()
            logger.error(f"Error fetching recurring rules: {e.message} ({e.code})")
            return {"processed": 0, "errors": [e.message or "Unknown error"]}

        if not due_rules:
            return _empty_result()

        processed = 0
        errors = []

        for rule in due_rules:
            try:
                if _catch_up_rule(store, rule, user_id, today, errors):
                    processed += 1
            except Exception as e:
                logger.exception(f"Unexpected error processing rule {rule.id}")
                errors.append(
                    f"Error processing rule {rule.id}: {str(e) or type(e).__name__}"
                )

        return {"processed": processed, "errors": errors}

    except Exception as e:
        if not str(e):
            return _empty_result()
        logger.error(f"Error in recurring payments reconciliation: {str(e)}")
        return {"processed": 0, "errors": [str(e)]}


@contextmanager
def reconciliation_lock(user_id):
    """
    Hold the per-user Redis lock around a reconciliation.

    Yields True when the caller may proceed. When Redis cannot be reached the
    reconciliation proceeds without the lock.
    """
    if not current_app.config.get("RECURRING_LOCK_ENABLED", True):
        yield True
        return

    lock = redis_client.lock(
        RECURRING_LOCK_KEY.format(user_id=user_id),
        timeout=current_app.config.get("RECURRING_LOCK_TIMEOUT", 60),
    )

    try:
        acquired = lock.acquire(blocking=False)
    except RedisError as e:
        logger.warning(f"Recurring lock unavailable for user {user_id}: {str(e)}")
        yield True
        return

    try:
        yield acquired
    finally:
        if acquired:
            try:
                lock.release()
            except RedisError as e:
                logger.warning(
                    f"Could not release recurring lock for user {user_id}: {str(e)}"
                )


def catch_up_recurring_payments(user, access_token):
    """
    Run the catch-up for the authenticated user. Called before the dashboard
    reads any data, so freshly materialized transactions show up at once.
    """
    user_id = user.id if user else None
    if not user_id:
        return _empty_result()

    with reconciliation_lock(user_id) as acquired:
        if not acquired:
            logger.info(
                f"Recurring payments for user {user_id} already being processed, skipping"
            )
            return _empty_result()

        result = reconcile(RecurringRuleStore(access_token), user_id)

    if result["processed"]:
        logger.info(
            f"Processed {result['processed']} recurring rules for user {user_id}"
        )
    for error in result["errors"]:
        logger.error(f"Recurring payments for user {user_id}: {error}")

    return result
