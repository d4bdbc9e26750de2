from decimal import Decimal
from app.extensions import db
from app.models.base import BaseModel
from app.utils.enums import AccountType


class Account(BaseModel):
    """A user's bank account, cash box, savings or investment account"""

    __tablename__ = "accounts"

    name = db.Column(db.String(100), nullable=False)
    type = db.Column(db.Enum(AccountType, name="account_type"), nullable=False)
    initial_balance = db.Column(db.Numeric(15, 2), default=0.00, nullable=False)
    user_id = db.Column(
        db.UUID(as_uuid=True),
        db.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    user = db.relationship(
        "User", backref=db.backref("accounts", lazy="dynamic", cascade="all, delete")
    )

    def __repr__(self):
        return f"<Account {self.name} (User: {self.user_id})>"

    @property
    def balance(self):
        """Initial balance plus every signed transaction amount on the account"""
        from app.models.transaction import Transaction

        total = (
            db.session.query(db.func.coalesce(db.func.sum(Transaction.amount), 0))
            .filter(Transaction.account_id == self.id)
            .scalar()
        )
        return Decimal(str(self.initial_balance or 0)) + Decimal(str(total))
