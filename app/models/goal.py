from datetime import date
from decimal import Decimal

from app.extensions import db
from app.models.base import BaseModel
from app.utils.constants import DEFAULT_GOAL_ICON


class Goal(BaseModel):
    """
    Savings goal of a user.

    The saved amount starts at zero and only moves through contributions
    (deposits and withdrawals). At most one goal per user is pinned.
    """

    __tablename__ = "goals"

    name = db.Column(db.String(100), nullable=False)
    target_amount = db.Column(db.Numeric(12, 2), nullable=False)
    current_amount = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    deadline = db.Column(db.Date, nullable=True)
    icon = db.Column(db.String(16), nullable=False, default=DEFAULT_GOAL_ICON)
    is_pinned = db.Column(db.Boolean, nullable=False, default=False)

    user_id = db.Column(
        db.UUID(as_uuid=True),
        db.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    user = db.relationship(
        "User", backref=db.backref("goals", lazy="dynamic", cascade="all, delete")
    )

    @property
    def progress(self):
        """Saved share of the target, 0 to 1 and above once overshot"""
        target = Decimal(str(self.target_amount))
        if target == 0:
            return Decimal("1")
        return Decimal(str(self.current_amount or 0)) / target

    @property
    def percentage(self):
        return min(100, int(self.progress * 100))

    @property
    def remaining(self):
        return max(
            Decimal("0"),
            Decimal(str(self.target_amount)) - Decimal(str(self.current_amount or 0)),
        )

    @property
    def is_completed(self):
        return Decimal(str(self.current_amount or 0)) >= Decimal(str(self.target_amount))

    @property
    def days_remaining(self):
        """Days until the deadline (negative once it has passed), None without one"""
        if self.deadline is None:
            return None
        return (self.deadline - date.today()).days

    def __repr__(self):
        return f"<Goal {self.name} {self.current_amount}/{self.target_amount}>"
