from datetime import date, timedelta

from flask import url_for

from app.models.recurring_rule import RecurringRule
from app.models.transaction import Transaction


class TestRecurringRuleCreate:
    """Tests for recurring rule creation"""

    def test_create_recurring_rule(
        self, client, test_user, recurring_rule_data, auth_headers, db_session
    ):
        response = client.post(
            url_for("recurring_rule.recurring_rules"),
            json=recurring_rule_data,
            headers=auth_headers,
        )

        assert response.status_code == 201
        data = response.get_json()
        assert data["amount"] == "-12.99"
        assert data["frequency"] == "MONTHLY"
        assert data["active"] is True
        assert data["user_id"] == str(test_user.id)
        # The first occurrence is the start date itself
        assert data["next_due_date"] == recurring_rule_data["start_date"]
        assert data["account"]["name"] == "Checking"
        assert data["category"]["name"] == "Housing"

    def test_cursor_and_active_cannot_be_set(
        self, client, recurring_rule_data, auth_headers, db_session
    ):
        recurring_rule_data["next_due_date"] = "2030-01-01"
        recurring_rule_data["active"] = False

        response = client.post(
            url_for("recurring_rule.recurring_rules"),
            json=recurring_rule_data,
            headers=auth_headers,
        )

        assert response.status_code == 201
        data = response.get_json()
        assert data["next_due_date"] == recurring_rule_data["start_date"]
        assert data["active"] is True

    def test_past_start_date_is_caught_up_on_dashboard(
        self, client, recurring_rule_data, auth_headers, db_session
    ):
        recurring_rule_data["frequency"] = "WEEKLY"
        recurring_rule_data["start_date"] = (
            date.today() - timedelta(weeks=2)
        ).isoformat()

        response = client.post(
            url_for("recurring_rule.recurring_rules"),
            json=recurring_rule_data,
            headers=auth_headers,
        )
        assert response.status_code == 201
        # Creating a rule does not materialize anything by itself
        assert Transaction.query.count() == 0

        client.get(url_for("dashboard.dashboard"), headers=auth_headers)

        assert Transaction.query.count() == 3
        rule = RecurringRule.query.one()
        assert rule.next_due_date == date.today() + timedelta(weeks=1)

    def test_invalid_frequency(self, client, recurring_rule_data, auth_headers, db_session):
        recurring_rule_data["frequency"] = "QUARTERLY"

        response = client.post(
            url_for("recurring_rule.recurring_rules"),
            json=recurring_rule_data,
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert "frequency" in response.get_json()["error"]

    def test_zero_amount(self, client, recurring_rule_data, auth_headers, db_session):
        recurring_rule_data["amount"] = "0"

        response = client.post(
            url_for("recurring_rule.recurring_rules"),
            json=recurring_rule_data,
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert "amount" in response.get_json()["error"]

    def test_missing_required_fields(self, client, auth_headers, db_session):
        response = client.post(
            url_for("recurring_rule.recurring_rules"), json={}, headers=auth_headers
        )

        assert response.status_code == 400
        errors = response.get_json()["error"]
        for field in ("amount", "frequency", "start_date", "account_id", "category_id"):
            assert field in errors

    def test_account_of_another_user(
        self, client, recurring_rule_data, user2_account, auth_headers, db_session
    ):
        recurring_rule_data["account_id"] = str(user2_account.id)

        response = client.post(
            url_for("recurring_rule.recurring_rules"),
            json=recurring_rule_data,
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert "account_id" in response.get_json()["error"]
        assert RecurringRule.query.count() == 0

    def test_create_without_token(self, client, recurring_rule_data, db_session):
        response = client.post(
            url_for("recurring_rule.recurring_rules"), json=recurring_rule_data
        )

        assert response.status_code == 401
