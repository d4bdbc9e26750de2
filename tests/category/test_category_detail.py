import uuid

from flask import url_for

from app.models.category import Category
from app.models.recurring_rule import RecurringRule


class TestCategoryDetailResource:
    def test_get_category(self, client, auth_headers, expense_category, db_session):
        response = client.get(
            url_for("category.category-detail", id=str(expense_category.id)),
            headers=auth_headers,
        )

        assert response.status_code == 200
        data = response.get_json()
        assert data["name"] == "Housing"
        assert data["icon"] == "🏠"

    def test_get_category_of_another_user(
        self, client, auth_headers_user2, expense_category, db_session
    ):
        response = client.get(
            url_for("category.category-detail", id=str(expense_category.id)),
            headers=auth_headers_user2,
        )

        assert response.status_code == 404

    def test_get_missing_category(self, client, auth_headers, db_session):
        response = client.get(
            url_for("category.category-detail", id=str(uuid.uuid4())),
            headers=auth_headers,
        )

        assert response.status_code == 404

    def test_delete_category_removes_its_rules(
        self, client, auth_headers, expense_category, recurring_rule, db_session
    ):
        """Deleting a category also deletes the rules and transactions filed under it"""
        category_id = expense_category.id

        response = client.delete(
            url_for("category.category-detail", id=str(category_id)),
            headers=auth_headers,
        )

        assert response.status_code == 204
        assert db_session.get(Category, category_id) is None
        assert RecurringRule.query.count() == 0

    def test_delete_category_of_another_user(
        self, client, auth_headers_user2, expense_category, db_session
    ):
        response = client.delete(
            url_for("category.category-detail", id=str(expense_category.id)),
            headers=auth_headers_user2,
        )

        assert response.status_code == 404
        assert db_session.get(Category, expense_category.id) is not None
