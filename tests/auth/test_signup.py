from flask import url_for

from app.models.user import User


class TestSignUp:
    """Test cases for user registration endpoint."""

    def test_successful_signup(self, client, db_session):
        """Test successful user registration."""
        new_user = {
            "username": "newuser",
            "email": "newuser@example.com",
            "password": "SecurePass123!",
            "name": "New User",
        }

        response = client.post(url_for("auth.signup"), json=new_user)

        assert response.status_code == 201
        data = response.get_json()
        assert data["username"] == "newuser"
        assert data["currency"] == "EUR"
        assert "password" not in data

        # Password is stored hashed
        user = User.query.filter_by(username="newuser").first()
        assert user.password != "SecurePass123!"
        assert user.check_password("SecurePass123!")

    def test_new_user_can_log_in(self, client, db_session):
        client.post(
            url_for("auth.signup"),
            json={
                "username": "newuser",
                "email": "newuser@example.com",
                "password": "SecurePass123!",
                "name": "New User",
                "currency": "USD",
            },
        )

        response = client.post(
            url_for("auth.login"),
            json={"username": "newuser@example.com", "password": "SecurePass123!"},
        )

        assert response.status_code == 200

    def test_duplicate_username_and_email(self, client, test_user, db_session):
        response = client.post(
            url_for("auth.signup"),
            json={
                "username": "testuser",
                "email": "user@test.com",
                "password": "SecurePass123!",
                "name": "Duplicate",
            },
        )

        assert response.status_code == 400
        errors = response.get_json()["error"]
        assert "Username is already taken." in errors["username"]
        assert "Email is already registered." in errors["email"]

    def test_invalid_payload(self, client, db_session):
        """Short password, malformed email and missing name are all reported."""
        response = client.post(
            url_for("auth.signup"),
            json={"username": "someone", "email": "not-an-email", "password": "short"},
        )

        assert response.status_code == 400
        errors = response.get_json()["error"]
        assert set(errors) >= {"email", "password", "name"}
        assert User.query.count() == 0
