import uuid
from datetime import date, timedelta

from flask import url_for

from app.models.transaction import Transaction
from app.services.recurring_payments import RecurringRuleStore, reconcile
from app.utils.enums import Frequency


class TestTransactionDetail:
    def test_get_recurring_transaction(
        self, client, test_user, auth_token, make_rule, auth_headers, db_session
    ):
        rule = make_rule(date.today(), description=None)
        reconcile(RecurringRuleStore(auth_token), test_user.id)
        transaction = Transaction.query.one()

        response = client.get(
            url_for("transaction.transaction-detail", id=str(transaction.id)),
            headers=auth_headers,
        )

        assert response.status_code == 200
        data = response.get_json()
        assert data["is_recurring"] is True
        assert data["recurring_rule_id"] == str(rule.id)
        assert data["description"] == "Recurring payment"
        assert data["category"]["name"] == "Housing"

    def test_get_missing_transaction(self, client, auth_headers, db_session):
        response = client.get(
            url_for("transaction.transaction-detail", id=str(uuid.uuid4())),
            headers=auth_headers,
        )

        assert response.status_code == 404


class TestTransactionDelete:
    def test_deleted_occurrence_is_not_recreated(
        self, client, test_user, auth_token, make_rule, auth_headers, db_session
    ):
        make_rule(date.today() - timedelta(days=1), frequency=Frequency.DAILY)
        store = RecurringRuleStore(auth_token)
        reconcile(store, test_user.id)
        transaction = Transaction.query.order_by(Transaction.date).first()

        response = client.delete(
            url_for("transaction.transaction-detail", id=str(transaction.id)),
            headers=auth_headers,
        )
        assert response.status_code == 204

        reconcile(store, test_user.id)
        assert Transaction.query.count() == 1

    def test_delete_transaction_of_another_user(
        self,
        client,
        test_user,
        auth_token,
        make_rule,
        auth_headers_user2,
        db_session,
    ):
        make_rule(date.today())
        reconcile(RecurringRuleStore(auth_token), test_user.id)
        transaction = Transaction.query.one()

        response = client.delete(
            url_for("transaction.transaction-detail", id=str(transaction.id)),
            headers=auth_headers_user2,
        )

        assert response.status_code == 404
        assert Transaction.query.count() == 1
