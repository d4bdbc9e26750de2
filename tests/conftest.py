import os
import sys
import pytest
import uuid
from datetime import date, timedelta
from decimal import Decimal

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

# Set environment to testing
os.environ["FLASK_ENV"] = "testing"

from app.config import TestConfig
from app.extensions import db, bcrypt
from app.models.user import User
from app.models.account import Account
from app.models.category import Category
from app.models.budget import Budget
from app.models.goal import Goal
from app.models.recurring_rule import RecurringRule
from app.models.transaction import Transaction
from app.utils.enums import AccountType, CategoryType, Frequency
from app import create_app


@pytest.fixture(scope="session")
def app():
    """Create and configure a Flask app for testing."""
    test_app = create_app(TestConfig)

    with test_app.app_context():
        db.create_all()

    yield test_app

    with test_app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def db_session(app):
    """Provide the database session and empty every table after the test."""
    with app.app_context():
        yield db.session

        db.session.rollback()
        for table in reversed(db.metadata.sorted_tables):
            db.session.execute(table.delete())
        db.session.commit()


@pytest.fixture
def client(app):
    """Flask test client for API requests."""
    return app.test_client()


def _make_user(db_session, username, email, password):
    user = User(
        id=uuid.uuid4(),
        username=username,
        email=email,
        password=bcrypt.generate_password_hash(password).decode("utf-8"),
        name=username.title(),
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def test_user(db_session):
    """Create a fresh test user for each test."""
    return _make_user(db_session, "testuser", "user@test.com", "Password123!")


@pytest.fixture
def test_user2(db_session):
    """Create a second, unrelated user."""
    return _make_user(db_session, "testuser2", "user@test2.com", "Password123!")


@pytest.fixture
def auth_token(client, test_user):
    """Get auth token for the regular test user."""
    response = client.post(
        "/api/auth/login",
        json={"username": "user@test.com", "password": "Password123!"},
    )
    return response.get_json()["access_token"]


@pytest.fixture
def auth_token2(client, test_user2):
    response = client.post(
        "/api/auth/login",
        json={"username": "testuser2", "password": "Password123!"},
    )
    return response.get_json()["access_token"]


@pytest.fixture
def auth_headers(auth_token):
    """Create authorization headers with user token."""
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
def auth_headers_user2(auth_token2):
    return {"Authorization": f"Bearer {auth_token2}"}


@pytest.fixture
def user_account(db_session, test_user):
    """Create a bank account for the test user."""
    account = Account(
        id=uuid.uuid4(),
        name="Checking",
        type=AccountType.BANK,
        initial_balance=Decimal("1000.00"),
        user_id=test_user.id,
    )
    db_session.add(account)
    db_session.commit()
    db_session.refresh(account)
    return account


@pytest.fixture
def user2_account(db_session, test_user2):
    account = Account(
        id=uuid.uuid4(),
        name="Other checking",
        type=AccountType.BANK,
        initial_balance=Decimal("0.00"),
        user_id=test_user2.id,
    )
    db_session.add(account)
    db_session.commit()
    return account


@pytest.fixture
def expense_category(db_session, test_user):
    category = Category(
        id=uuid.uuid4(),
        name="Housing",
        type=CategoryType.EXPENSE,
        icon="🏠",
        user_id=test_user.id,
    )
    db_session.add(category)
    db_session.commit()
    db_session.refresh(category)
    return category


@pytest.fixture
def income_category(db_session, test_user):
    category = Category(
        id=uuid.uuid4(),
        name="Salary",
        type=CategoryType.INCOME,
        icon="💰",
        user_id=test_user.id,
    )
    db_session.add(category)
    db_session.commit()
    db_session.refresh(category)
    return category


@pytest.fixture
def make_rule(db_session, test_user, user_account, expense_category):
    """Factory creating recurring rules for the test user."""

    def _make_rule(
        next_due_date,
        frequency=Frequency.MONTHLY,
        amount=Decimal("-850.00"),
        description="Rent",
        active=True,
        user=None,
        account=None,
        category=None,
    ):
        rule = RecurringRule(
            id=uuid.uuid4(),
            amount=amount,
            description=description,
            frequency=frequency,
            start_date=next_due_date,
            next_due_date=next_due_date,
            active=active,
            user_id=(user or test_user).id,
            account_id=(account or user_account).id,
            category_id=(category or expense_category).id,
        )
        db_session.add(rule)
        db_session.commit()
        db_session.refresh(rule)
        return rule

    return _make_rule


@pytest.fixture
def recurring_rule(make_rule):
    """A monthly rent rule due in the future."""
    return make_rule(date.today() + timedelta(days=10))


@pytest.fixture
def recurring_rule_data(user_account, expense_category):
    """Sample data for creating a recurring rule."""
    return {
        "amount": "-12.99",
        "description": "Streaming subscription",
        "frequency": "MONTHLY",
        "start_date": (date.today() + timedelta(days=1)).isoformat(),
        "account_id": str(user_account.id),
        "category_id": str(expense_category.id),
    }


@pytest.fixture
def make_transaction(db_session, test_user, user_account, expense_category):
    """Factory creating plain transactions for the test user."""

    def _make_transaction(amount, on_date, category=None, user=None, account=None):
        transaction = Transaction(
            id=uuid.uuid4(),
            amount=Decimal(amount),
            date=on_date,
            user_id=(user or test_user).id,
            account_id=(account or user_account).id,
            category_id=(category or expense_category).id,
        )
        db_session.add(transaction)
        db_session.commit()
        return transaction

    return _make_transaction


@pytest.fixture
def user_budget(db_session, test_user, expense_category):
    """A 500.00 Housing budget for March 2025."""
    budget = Budget(
        id=uuid.uuid4(),
        amount=Decimal("500.00"),
        month=3,
        year=2025,
        user_id=test_user.id,
        category_id=expense_category.id,
    )
    db_session.add(budget)
    db_session.commit()
    db_session.refresh(budget)
    return budget


@pytest.fixture
def budget_data(expense_category):
    """Sample data for creating a budget."""
    return {
        "amount": "400.00",
        "month": 5,
        "year": 2025,
        "category_id": str(expense_category.id),
    }


@pytest.fixture
def make_goal(db_session, test_user):
    """Factory creating savings goals for the test user."""

    def _make_goal(name, target, current="0.00", is_pinned=False, deadline=None, user=None):
        goal = Goal(
            id=uuid.uuid4(),
            name=name,
            target_amount=Decimal(target),
            current_amount=Decimal(current),
            is_pinned=is_pinned,
            deadline=deadline,
            user_id=(user or test_user).id,
        )
        db_session.add(goal)
        db_session.commit()
        db_session.refresh(goal)
        return goal

    return _make_goal


@pytest.fixture
def user_goal(make_goal):
    """A holiday goal, 250.00 saved out of 1000.00."""
    return make_goal("Holiday", "1000.00", current="250.00")
