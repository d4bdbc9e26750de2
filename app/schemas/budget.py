from datetime import date

from flask import g
from marshmallow import fields, validates_schema, ValidationError, EXCLUDE
from marshmallow.validate import Range

from app.extensions import ma
from app.models.budget import Budget
from app.models.category import Category
from app.schemas.category import CategorySchema
from app.utils.constants import AMOUNT_MAX_ABS_VALUE, BUDGET_MAX_YEAR, BUDGET_MIN_YEAR
from app.utils.enums import CategoryType
from app.utils.logger import logger
from app.utils.validators import find_owned


class BudgetSchema(ma.SQLAlchemyAutoSchema):
    """Schema for Budget model - used for creation and reading"""

    class Meta:
        model = Budget
        load_instance = True
        include_fk = True
        fields = (
            "id",
            "user_id",
            "category_id",
            "category",
            "amount",
            "month",
            "year",
            "spent",
            "remaining",
            "percentage_used",
            "is_exceeded",
            "created_at",
            "updated_at",
        )
        dump_only = (
            "id",
            "user_id",
            "category",
            "created_at",
            "updated_at",
        )
        unknown = EXCLUDE

    amount = fields.Decimal(
        required=True,
        places=2,
        as_string=True,
        validate=Range(min=0, min_inclusive=False, max=AMOUNT_MAX_ABS_VALUE),
    )
    # Omitted month/year mean the current calendar month
    month = fields.Integer(
        load_default=lambda: date.today().month,
        validate=Range(min=1, max=12, error="Month must be between 1 and 12"),
    )
    year = fields.Integer(
        load_default=lambda: date.today().year,
        validate=Range(min=BUDGET_MIN_YEAR, max=BUDGET_MAX_YEAR),
    )

    category = fields.Nested(
        CategorySchema, only=("id", "name", "icon"), dump_only=True
    )
    spent = fields.Decimal(places=2, as_string=True, dump_only=True)
    remaining = fields.Decimal(places=2, as_string=True, dump_only=True)
    percentage_used = fields.Integer(dump_only=True)
    is_exceeded = fields.Boolean(dump_only=True)

    @validates_schema
    def validate_budget(self, data, **kwargs):
        """The category must be one of the user's expense categories, once per month"""
        category = find_owned(Category, data.get("category_id"), g.user)
        if not category:
            raise ValidationError("Category not found", "category_id")

        if category.type != CategoryType.EXPENSE:
            raise ValidationError(
                "Budgets can only be set on expense categories", "category_id"
            )

        existing = Budget.query.filter(
            Budget.user_id == g.user.id,
            Budget.category_id == category.id,
            Budget.month == data["month"],
            Budget.year == data["year"],
        ).first()

        if existing:
            raise ValidationError(
                "A budget already exists for this category, month and year",
                "month_year",
            )

        logger.debug("Budget validation passed")


class BudgetUpdateSchema(ma.SQLAlchemyAutoSchema):
    """Schema for updating Budget - only amount can be changed"""

    class Meta:
        model = Budget
        load_instance = True
        fields = ("amount",)
        unknown = EXCLUDE

    amount = fields.Decimal(
        required=True,
        places=2,
        as_string=True,
        validate=Range(min=0, min_inclusive=False, max=AMOUNT_MAX_ABS_VALUE),
    )


# Create schema instances
budget_schema = BudgetSchema()
budgets_schema = BudgetSchema(many=True)
budget_update_schema = BudgetUpdateSchema()
