from marshmallow import fields, EXCLUDE
from marshmallow.validate import Length
from app.extensions import ma
from app.models.account import Account
from app.utils.enums import AccountType


class AccountSchema(ma.SQLAlchemyAutoSchema):
    """Schema for Account model - used for creation and reading"""

    class Meta:
        model = Account
        load_instance = True
        include_fk = True
        fields = (
            "id",
            "name",
            "type",
            "initial_balance",
            "balance",
            "user_id",
            "created_at",
            "updated_at",
        )
        dump_only = ("id", "balance", "user_id", "created_at", "updated_at")
        unknown = EXCLUDE

    name = fields.String(required=True, validate=Length(min=1, max=100))
    type = fields.Enum(AccountType, by_value=True, required=True)
    initial_balance = fields.Decimal(places=2, as_string=True)
    balance = fields.Decimal(places=2, as_string=True, dump_only=True)


class AccountUpdateSchema(ma.SQLAlchemyAutoSchema):
    """Schema for updating an account - name, type and opening balance"""

    class Meta:
        model = Account
        load_instance = True
        fields = ("name", "type", "initial_balance")
        unknown = EXCLUDE

    name = fields.String(validate=Length(min=1, max=100))
    type = fields.Enum(AccountType, by_value=True)
    initial_balance = fields.Decimal(places=2, as_string=True)


account_schema = AccountSchema()
accounts_schema = AccountSchema(many=True)
account_update_schema = AccountUpdateSchema()
