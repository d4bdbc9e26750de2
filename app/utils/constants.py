from decimal import Decimal

from app.utils.enums import CategoryType

MAX_PAGE_SIZE = 100

AMOUNT_MAX_ABS_VALUE = Decimal("10000000")

DEFAULT_RECURRING_DESCRIPTION = "Recurring payment"

RECENT_TRANSACTIONS_LIMIT = 5
UPCOMING_PAYMENTS_LIMIT = 5

UPCOMING_DEFAULT_COUNT = 6
UPCOMING_MAX_COUNT = 24

RECURRING_LOCK_KEY = "recurring:reconcile:{user_id}"

# Seeded on the first dashboard load of a user with no categories
DEFAULT_CATEGORIES = [
    {"name": "Salary", "type": CategoryType.INCOME, "icon": "💰"},
    {"name": "Freelance", "type": CategoryType.INCOME, "icon": "💻"},
    {"name": "Investments", "type": CategoryType.INCOME, "icon": "📈"},
    {"name": "Other income", "type": CategoryType.INCOME, "icon": "💵"},
    {"name": "Food", "type": CategoryType.EXPENSE, "icon": "🍔"},
    {"name": "Transport", "type": CategoryType.EXPENSE, "icon": "🚗"},
    {"name": "Housing", "type": CategoryType.EXPENSE, "icon": "🏠"},
    {"name": "Entertainment", "type": CategoryType.EXPENSE, "icon": "🎬"},
    {"name": "Health", "type": CategoryType.EXPENSE, "icon": "🏥"},
    {"name": "Shopping", "type": CategoryType.EXPENSE, "icon": "🛒"},
    {"name": "Services", "type": CategoryType.EXPENSE, "icon": "📱"},
    {"name": "Other expenses", "type": CategoryType.EXPENSE, "icon": "📦"},
]

BUDGET_SUMMARY_LIMIT = 3
BUDGET_MIN_YEAR = 2000
BUDGET_MAX_YEAR = 2100

DEFAULT_GOAL_ICON = "🎯"
