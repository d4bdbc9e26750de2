import uuid
from datetime import date

from flask import url_for

from app.models.budget import Budget
from app.models.category import Category
from app.models.transaction import Transaction
from app.utils.enums import CategoryType


class TestBudgetSpending:
    """Spending is summed from the category's transactions of the budget month"""

    def test_spending_of_the_month(
        self, client, user_budget, auth_headers, make_transaction, db_session, test_user
    ):
        other_category = Category(
            id=uuid.uuid4(), name="Food", type=CategoryType.EXPENSE, user_id=test_user.id
        )
        db_session.add(other_category)
        db_session.commit()

        make_transaction("-120.50", date(2025, 3, 1))
        make_transaction("-80.00", date(2025, 3, 31))
        make_transaction("-50.00", date(2025, 2, 28))
        make_transaction("-999.00", date(2025, 4, 1))
        make_transaction("-30.00", date(2025, 3, 10), category=other_category)

        response = client.get(
            url_for("budget.budget-detail", id=user_budget.id), headers=auth_headers
        )

        assert response.status_code == 200
        data = response.get_json()
        assert data["spent"] == "200.50"
        assert data["remaining"] == "299.50"
        assert data["percentage_used"] == 40
        assert data["is_exceeded"] is False

    def test_exceeded_budget(
        self, client, user_budget, auth_headers, make_transaction, db_session
    ):
        make_transaction("-600.00", date(2025, 3, 15))

        response = client.get(
            url_for("budget.budget-detail", id=user_budget.id), headers=auth_headers
        )

        data = response.get_json()
        assert data["spent"] == "600.00"
        assert data["remaining"] == "0.00"
        assert data["percentage_used"] == 120
        assert data["is_exceeded"] is True

    def test_other_users_budget_not_found(
        self, client, user_budget, auth_headers_user2, db_session
    ):
        response = client.get(
            url_for("budget.budget-detail", id=user_budget.id),
            headers=auth_headers_user2,
        )

        assert response.status_code == 404
        assert response.get_json()["error"] == "Budget not found."


class TestBudgetUpdate:
    def test_update_amount(self, client, user_budget, auth_headers, db_session):
        response = client.patch(
            url_for("budget.budget-detail", id=user_budget.id),
            json={"amount": "250.00", "month": 7},
            headers=auth_headers,
        )

        assert response.status_code == 200
        data = response.get_json()
        assert data["amount"] == "250.00"
        # The month of a budget is fixed
        assert data["month"] == 3

    def test_update_zero_amount(self, client, user_budget, auth_headers, db_session):
        response = client.patch(
            url_for("budget.budget-detail", id=user_budget.id),
            json={"amount": "0.00"},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert "amount" in response.get_json()["error"]


class TestBudgetDelete:
    def test_delete_keeps_transactions(
        self, client, user_budget, auth_headers, make_transaction, db_session
    ):
        make_transaction("-20.00", date(2025, 3, 3))

        response = client.delete(
            url_for("budget.budget-detail", id=user_budget.id), headers=auth_headers
        )

        assert response.status_code == 204
        assert Budget.query.count() == 0
        assert Transaction.query.count() == 1

    def test_delete_other_users_budget(
        self, client, user_budget, auth_headers_user2, db_session
    ):
        response = client.delete(
            url_for("budget.budget-detail", id=user_budget.id),
            headers=auth_headers_user2,
        )

        assert response.status_code == 404
        assert Budget.query.count() == 1
