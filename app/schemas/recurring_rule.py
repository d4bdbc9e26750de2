from marshmallow import fields, validates, validates_schema, EXCLUDE
from marshmallow.validate import Length, Range

from app.extensions import ma
from app.models.recurring_rule import RecurringRule
from app.schemas.account import AccountSchema
from app.schemas.category import CategorySchema
from app.schemas.transaction import validate_owned_references
from app.utils.constants import (
    AMOUNT_MAX_ABS_VALUE,
    UPCOMING_DEFAULT_COUNT,
    UPCOMING_MAX_COUNT,
)
from app.utils.enums import Frequency
from app.utils.logger import logger
from app.utils.validators import validate_signed_amount


class RecurringRuleSchema(ma.SQLAlchemyAutoSchema):
    """Schema for RecurringRule model - used for creation and reading"""

    class Meta:
        model = RecurringRule
        load_instance = True
        include_fk = True
        fields = (
            "id",
            "user_id",
            "account_id",
            "category_id",
            "account",
            "category",
            "amount",
            "description",
            "frequency",
            "start_date",
            "next_due_date",
            "active",
            "created_at",
            "updated_at",
        )
        dump_only = (
            "id",
            "user_id",
            "account",
            "category",
            "next_due_date",
            "active",
            "created_at",
            "updated_at",
        )
        unknown = EXCLUDE

    # Define nested fields
    account = fields.Nested(AccountSchema, only=("id", "name"), dump_only=True)
    category = fields.Nested(
        CategorySchema, only=("id", "name", "type", "icon"), dump_only=True
    )

    # The set of frequencies is closed; anything else is rejected here
    frequency = fields.Enum(Frequency, by_value=True, required=True)

    amount = fields.Decimal(required=True, places=2, as_string=True)
    description = fields.String(validate=Length(max=255), allow_none=True)

    @validates("amount")
    def validate_amount(self, value, **kwargs):
        validate_signed_amount(value, AMOUNT_MAX_ABS_VALUE)

    @validates_schema
    def validate_recurring_rule(self, data, **kwargs):
        """Additional validation for the whole recurring rule"""
        logger.debug("Performing whole recurring rule validation")
        validate_owned_references(data)
        logger.debug("Recurring rule validation passed")


class RecurringRuleUpdateSchema(ma.SQLAlchemyAutoSchema):
    """
    Schema for updating a RecurringRule: amount, description and pause/resume.
    Schedule fields and the cursor are not editable.
    """

    class Meta:
        model = RecurringRule
        load_instance = True
        fields = ("amount", "description", "active")
        unknown = EXCLUDE

    amount = fields.Decimal(places=2, as_string=True)
    description = fields.String(validate=Length(max=255), allow_none=True)
    active = fields.Boolean()

    @validates("amount")
    def validate_amount(self, value, **kwargs):
        validate_signed_amount(value, AMOUNT_MAX_ABS_VALUE)


class UpcomingPaymentsSchema(ma.Schema):
    """Query parameters of the upcoming occurrences endpoint"""

    class Meta:
        unknown = EXCLUDE

    count = fields.Integer(
        load_default=UPCOMING_DEFAULT_COUNT,
        validate=Range(min=1, max=UPCOMING_MAX_COUNT),
    )


# Initialize schemas
recurring_rule_schema = RecurringRuleSchema()
recurring_rules_schema = RecurringRuleSchema(many=True)
recurring_rule_update_schema = RecurringRuleUpdateSchema()
upcoming_payments_schema = UpcomingPaymentsSchema()
