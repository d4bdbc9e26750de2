from marshmallow import fields, validate, validates, ValidationError, EXCLUDE
from app.extensions import ma
from app.models.user import User


class UserSchema(ma.SQLAlchemyAutoSchema):
    class Meta:
        model = User
        load_instance = True
        fields = [
            "id",
            "username",
            "email",
            "password",
            "name",
            "currency",
            "created_at",
            "updated_at",
        ]

        load_only = ["password"]
        dump_only = ["id", "created_at", "updated_at"]
        unknown = EXCLUDE

    username = fields.String(required=True, validate=validate.Length(min=3, max=120))
    email = fields.Email(required=True, validate=validate.Length(max=120))
    password = fields.String(
        required=True, validate=validate.Length(min=8, max=128), load_only=True
    )
    name = fields.String(required=True, validate=validate.Length(min=1, max=100))
    currency = fields.String(validate=validate.Length(equal=3))

    @validates("username")
    def validate_username(self, value, **kwargs):
        if User.query.filter_by(username=value).first():
            raise ValidationError("Username is already taken.")

    @validates("email")
    def validate_email(self, value, **kwargs):
        if User.query.filter_by(email=value).first():
            raise ValidationError("Email is already registered.")


class LoginSchema(ma.Schema):
    username = fields.String(required=True)
    password = fields.String(required=True)


user_schema = UserSchema()
login_schema = LoginSchema()
