from flask import Blueprint
from flask_restful import Api
from app.resources.account import (
    AccountListResource,
    AccountDetailResource,
)


account_bp = Blueprint("account", __name__)
account_api = Api(account_bp)

account_api.add_resource(AccountListResource, "", endpoint="accounts")
account_api.add_resource(AccountDetailResource, "/<id>", endpoint="account-detail")
