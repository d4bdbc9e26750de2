from marshmallow import fields, validates, ValidationError, EXCLUDE
from marshmallow.validate import Length, Range

from app.extensions import ma
from app.models.goal import Goal
from app.utils.constants import AMOUNT_MAX_ABS_VALUE, DEFAULT_GOAL_ICON
from app.utils.validators import validate_signed_amount


class GoalSchema(ma.SQLAlchemyAutoSchema):
    """Schema for Goal model - used for creation and reading"""

    class Meta:
        model = Goal
        load_instance = True
        include_fk = True
        fields = (
            "id",
            "user_id",
            "name",
            "icon",
            "target_amount",
            "current_amount",
            "deadline",
            "is_pinned",
            "percentage",
            "remaining",
            "is_completed",
            "days_remaining",
            "created_at",
            "updated_at",
        )
        dump_only = (
            "id",
            "user_id",
            "current_amount",
            "is_pinned",
            "created_at",
            "updated_at",
        )
        unknown = EXCLUDE

    name = fields.String(required=True, validate=Length(min=1, max=100))
    icon = fields.String(load_default=DEFAULT_GOAL_ICON, validate=Length(min=1, max=16))
    target_amount = fields.Decimal(
        required=True,
        places=2,
        as_string=True,
        validate=Range(min=0, min_inclusive=False, max=AMOUNT_MAX_ABS_VALUE),
    )
    current_amount = fields.Decimal(places=2, as_string=True, dump_only=True)
    deadline = fields.Date(allow_none=True)

    percentage = fields.Integer(dump_only=True)
    remaining = fields.Decimal(places=2, as_string=True, dump_only=True)
    is_completed = fields.Boolean(dump_only=True)
    days_remaining = fields.Integer(dump_only=True, allow_none=True)


class GoalUpdateSchema(ma.SQLAlchemyAutoSchema):
    """Schema for updating a Goal; the saved amount moves only through contributions"""

    class Meta:
        model = Goal
        load_instance = True
        fields = ("name", "icon", "target_amount", "deadline")
        unknown = EXCLUDE

    name = fields.String(validate=Length(min=1, max=100))
    icon = fields.String(validate=Length(min=1, max=16))
    target_amount = fields.Decimal(
        places=2,
        as_string=True,
        validate=Range(min=0, min_inclusive=False, max=AMOUNT_MAX_ABS_VALUE),
    )
    deadline = fields.Date(allow_none=True)


class GoalContributionSchema(ma.Schema):
    """A deposit (positive amount) into or a withdrawal (negative) from a goal"""

    class Meta:
        unknown = EXCLUDE

    amount = fields.Decimal(required=True, places=2)

    @validates("amount")
    def validate_amount(self, value, **kwargs):
        validate_signed_amount(value, AMOUNT_MAX_ABS_VALUE)


goal_schema = GoalSchema()
goals_schema = GoalSchema(many=True)
goal_update_schema = GoalUpdateSchema()
goal_contribution_schema = GoalContributionSchema()
