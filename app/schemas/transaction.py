from flask import g
from marshmallow import fields, validates, validates_schema, ValidationError, EXCLUDE

from app.extensions import ma
from app.models.account import Account
from app.models.category import Category
from app.models.transaction import Transaction
from app.schemas.account import AccountSchema
from app.schemas.category import CategorySchema
from app.utils.constants import AMOUNT_MAX_ABS_VALUE
from app.utils.logger import logger
from app.utils.validators import find_owned, validate_signed_amount


def validate_owned_references(data):
    """Account and category referenced by the payload must belong to g.user"""
    errors = {}

    if "account_id" in data and not find_owned(Account, data["account_id"], g.user):
        errors["account_id"] = ["Account not found"]

    if "category_id" in data and not find_owned(Category, data["category_id"], g.user):
        errors["category_id"] = ["Category not found"]

    if errors:
        raise ValidationError(errors)


class TransactionSchema(ma.SQLAlchemyAutoSchema):
    """Schema for Transaction model - used for creation and reading"""

    class Meta:
        model = Transaction
        load_instance = True
        include_fk = True
        fields = (
            "id",
            "user_id",
            "account_id",
            "category_id",
            "recurring_rule_id",
            "account",
            "category",
            "amount",
            "date",
            "description",
            "is_recurring",
            "created_at",
            "updated_at",
        )
        dump_only = (
            "id",
            "user_id",
            "recurring_rule_id",
            "account",
            "category",
            "is_recurring",
            "created_at",
            "updated_at",
        )
        unknown = EXCLUDE

    account = fields.Nested(AccountSchema, only=("id", "name"), dump_only=True)
    category = fields.Nested(
        CategorySchema, only=("id", "name", "type", "icon"), dump_only=True
    )

    amount = fields.Decimal(required=True, places=2, as_string=True)

    @validates("amount")
    def validate_amount(self, value, **kwargs):
        validate_signed_amount(value, AMOUNT_MAX_ABS_VALUE)

    @validates_schema
    def validate_transaction(self, data, **kwargs):
        logger.debug("Performing whole transaction validation")
        validate_owned_references(data)


transaction_schema = TransactionSchema()
transactions_schema = TransactionSchema(many=True)
