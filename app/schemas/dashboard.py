from marshmallow import fields
from app.extensions import ma
from app.schemas.account import AccountSchema
from app.schemas.budget import BudgetSchema
from app.schemas.goal import GoalSchema
from app.schemas.recurring_rule import RecurringRuleSchema
from app.schemas.transaction import TransactionSchema


class DashboardSchema(ma.Schema):
    """Serialises the dashboard summary built by the dashboard service"""

    accounts = fields.List(
        fields.Nested(AccountSchema, only=("id", "name", "type", "balance"))
    )
    total_balance = fields.Decimal(places=2, as_string=True)
    total_income = fields.Decimal(places=2, as_string=True)
    total_expenses = fields.Decimal(places=2, as_string=True)
    recent_transactions = fields.List(fields.Nested(TransactionSchema))
    upcoming_payments = fields.List(
        fields.Nested(
            RecurringRuleSchema,
            only=("id", "amount", "description", "frequency", "next_due_date", "category"),
        )
    )
    # Current month, most consumed first
    budgets = fields.List(
        fields.Nested(
            BudgetSchema,
            only=("id", "category", "amount", "spent", "percentage_used", "is_exceeded"),
        )
    )
    goal = fields.Nested(GoalSchema, allow_none=True)


dashboard_schema = DashboardSchema()
