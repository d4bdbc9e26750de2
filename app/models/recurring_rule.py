from app.extensions import db
from app.models.base import BaseModel
from app.utils.enums import Frequency


class RecurringRule(BaseModel):
    """
    Schedule template for a recurring payment (rent, salary, subscriptions).

    next_due_date is the earliest occurrence not yet materialized as a
    transaction. Only the catch-up processor moves it, and only forward.
    """

    __tablename__ = "recurring_rules"

    amount = db.Column(db.Numeric(12, 2), nullable=False)
    description = db.Column(db.Text, nullable=True)
    frequency = db.Column(db.Enum(Frequency, name="recurring_frequency"), nullable=False)
    start_date = db.Column(db.Date, nullable=False)
    next_due_date = db.Column(db.Date, nullable=False, index=True)
    active = db.Column(db.Boolean, nullable=False, default=True)

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

    # Relationships
    user = db.relationship(
        "User",
        backref=db.backref("recurring_rules", lazy="dynamic", cascade="all, delete"),
    )
    account = db.relationship(
        "Account",
        backref=db.backref("recurring_rules", lazy="dynamic", cascade="all, delete"),
    )
    category = db.relationship(
        "Category",
        backref=db.backref("recurring_rules", lazy="dynamic", cascade="all, delete"),
    )

    def __repr__(self):
        return f"<RecurringRule {self.id} {self.frequency.value} {self.amount} next:{self.next_due_date}>"
