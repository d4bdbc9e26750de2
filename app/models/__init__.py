from app.models.user import User
from app.models.auth import ActiveAccessToken
from app.models.account import Account
from app.models.category import Category
from app.models.recurring_rule import RecurringRule
from app.models.transaction import Transaction
from app.models.budget import Budget
from app.models.goal import Goal
