from datetime import date
from decimal import Decimal

from dateutil.relativedelta import relativedelta

from app.extensions import db
from app.models.base import BaseModel


class Budget(BaseModel):
    """Spending limit of one expense category for one calendar month"""

    __tablename__ = "budgets"

    amount = db.Column(db.Numeric(12, 2), nullable=False)
    month = db.Column(db.Integer, nullable=False)
    year = db.Column(db.Integer, nullable=False)

    user_id = db.Column(
        db.UUID(as_uuid=True),
        db.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    category_id = db.Column(
        db.UUID(as_uuid=True),
        db.ForeignKey("categories.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Relationship
    user = db.relationship(
        "User", backref=db.backref("budgets", lazy="dynamic", cascade="all, delete")
    )
    category = db.relationship(
        "Category", backref=db.backref("budgets", lazy="dynamic", cascade="all, delete")
    )

    __table_args__ = (
        db.UniqueConstraint(
            "user_id", "category_id", "month", "year", name="unique_user_category_month"
        ),
    )

    @property
    def period(self):
        """First day of the budget month and first day of the next one"""
        start = date(self.year, self.month, 1)
        return start, start + relativedelta(months=1)

    @property
    def spent(self):
        """Absolute total of the category's transactions dated in the month"""
        from app.models.transaction import Transaction

        start, end = self.period
        total = (
            db.session.query(
                db.func.coalesce(db.func.sum(db.func.abs(Transaction.amount)), 0)
            )
            .filter(
                Transaction.user_id == self.user_id,
                Transaction.category_id == self.category_id,
                Transaction.date >= start,
                Transaction.date < end,
            )
            .scalar()
        )
        return Decimal(str(total))

    @property
    def remaining(self):
        """Calculate remaining budget"""
        return max(Decimal("0"), Decimal(str(self.amount)) - self.spent)

    @property
    def usage_ratio(self):
        amount = Decimal(str(self.amount))
        spent = self.spent
        if amount == 0:
            return Decimal("1") if spent > 0 else Decimal("0")
        return spent / amount

    @property
    def percentage_used(self):
        """Whole percentage of the limit spent; goes past 100 once exceeded"""
        return int(self.usage_ratio * 100)

    @property
    def is_exceeded(self):
        return self.spent > Decimal(str(self.amount))

    def __repr__(self):
        return f"<Budget {self.id}: {self.user_id} | {self.category_id} | {self.month}/{self.year}>"
