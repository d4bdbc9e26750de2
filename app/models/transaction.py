import datetime
from app.extensions import db
from app.models.base import BaseModel


class Transaction(BaseModel):
    """
    Model for financial transactions.

    The amount is signed: negative for expenses, positive for income.
    Transactions materialized from a recurring rule keep a reference to it.
    """

    __tablename__ = "transactions"

    amount = db.Column(db.Numeric(12, 2), nullable=False)
    date = db.Column(db.Date, nullable=False, default=datetime.date.today, index=True)
    description = db.Column(db.Text, nullable=True)
    is_recurring = db.Column(db.Boolean, nullable=False, default=False)

    # Foreign keys
    user_id = db.Column(
        db.UUID(as_uuid=True),
        db.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    account_id = db.Column(
        db.UUID(as_uuid=True),
        db.ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    category_id = db.Column(
        db.UUID(as_uuid=True),
        db.ForeignKey("categories.id", ondelete="CASCADE"),
        nullable=False,
    )
    recurring_rule_id = db.Column(
        db.UUID(as_uuid=True),
        db.ForeignKey("recurring_rules.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    # Relationships
    user = db.relationship(
        "User",
        backref=db.backref("transactions", lazy="dynamic", cascade="all, delete"),
    )
    account = db.relationship(
        "Account",
        backref=db.backref("transactions", lazy="dynamic", cascade="all, delete"),
    )
    category = db.relationship(
        "Category",
        backref=db.backref("transactions", lazy="dynamic", cascade="all, delete"),
    )
    recurring_rule = db.relationship(
        "RecurringRule",
        backref=db.backref("transactions", lazy="dynamic"),
    )

    def __repr__(self):
        return f"<Transaction {self.user_id} | {self.account_id} | {self.date} {self.amount}>"
