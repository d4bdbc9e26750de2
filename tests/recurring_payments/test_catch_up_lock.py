from datetime import date, timedelta
from unittest.mock import patch

from redis.exceptions import ConnectionError as RedisConnectionError

from app.models.transaction import Transaction
from app.services.recurring_payments import catch_up_recurring_payments
from app.utils.enums import Frequency


class TestCatchUpRecurringPayments:
    @patch("app.services.recurring_payments.redis_client")
    def test_lock_disabled_does_not_touch_redis(
        self, mock_redis, app, db_session, auth_token, test_user, make_rule
    ):
        make_rule(date.today() - timedelta(days=1), frequency=Frequency.DAILY)

        result = catch_up_recurring_payments(test_user, auth_token)

        assert result == {"processed": 1, "errors": []}
        mock_redis.lock.assert_not_called()

    @patch("app.services.recurring_payments.redis_client")
    def test_lock_held_elsewhere_skips_processing(
        self, mock_redis, app, db_session, auth_token, test_user, make_rule
    ):
        make_rule(date.today() - timedelta(days=1), frequency=Frequency.DAILY)
        mock_redis.lock.return_value.acquire.return_value = False
        app.config["RECURRING_LOCK_ENABLED"] = True
        try:
            result = catch_up_recurring_payments(test_user, auth_token)
        finally:
            app.config["RECURRING_LOCK_ENABLED"] = False

        assert result == {"processed": 0, "errors": []}
        assert Transaction.query.count() == 0
        mock_redis.lock.return_value.release.assert_not_called()

    @patch("app.services.recurring_payments.redis_client")
    def test_lock_acquired_and_released(
        self, mock_redis, app, db_session, auth_token, test_user, make_rule
    ):
        make_rule(date.today() - timedelta(days=1), frequency=Frequency.DAILY)
        lock = mock_redis.lock.return_value
        lock.acquire.return_value = True
        app.config["RECURRING_LOCK_ENABLED"] = True
        try:
            result = catch_up_recurring_payments(test_user, auth_token)
        finally:
            app.config["RECURRING_LOCK_ENABLED"] = False

        assert result["processed"] == 1
        assert mock_redis.lock.call_args.args[0] == f"recurring:reconcile:{test_user.id}"
        lock.acquire.assert_called_once_with(blocking=False)
        lock.release.assert_called_once()

    @patch("app.services.recurring_payments.redis_client")
    def test_redis_unavailable_runs_unlocked(
        self, mock_redis, app, db_session, auth_token, test_user, make_rule
    ):
        make_rule(date.today() - timedelta(days=2), frequency=Frequency.DAILY)
        mock_redis.lock.return_value.acquire.side_effect = RedisConnectionError("down")
        app.config["RECURRING_LOCK_ENABLED"] = True
        try:
            result = catch_up_recurring_payments(test_user, auth_token)
        finally:
            app.config["RECURRING_LOCK_ENABLED"] = False

        assert result == {"processed": 1, "errors": []}
        assert Transaction.query.count() == 3

    def test_without_user(self, app, db_session):
        assert catch_up_recurring_payments(None, "token") == {"processed": 0, "errors": []}
