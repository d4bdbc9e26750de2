from flask import g
from marshmallow import fields, validates, ValidationError, EXCLUDE
from marshmallow.validate import Length
from app.extensions import ma
from app.models.category import Category
from app.utils.enums import CategoryType


class CategorySchema(ma.SQLAlchemyAutoSchema):
    """Schema for Category model - used for creation and reading"""

    class Meta:
        model = Category
        load_instance = True
        include_fk = True
        fields = ("id", "name", "type", "icon", "user_id", "created_at", "updated_at")
        dump_only = ("id", "user_id", "created_at", "updated_at")
        unknown = EXCLUDE

    name = fields.String(required=True, validate=Length(min=1, max=100))
    type = fields.Enum(CategoryType, by_value=True, required=True)
    icon = fields.String(validate=Length(max=16), allow_none=True)

    @validates("name")
    def validate_name(self, value, **kwargs):
        """Category names are unique per user"""
        existing = Category.query.filter_by(user_id=g.user.id, name=value).first()
        if existing:
            raise ValidationError(f"Category '{value}' already exists")


category_schema = CategorySchema()
categories_schema = CategorySchema(many=True)
