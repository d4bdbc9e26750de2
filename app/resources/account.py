from flask_restful import Resource
from flask import g, request
from marshmallow import ValidationError

from app.models.account import Account
from app.schemas.account import account_schema, accounts_schema, account_update_schema
from app.services.account import (
    get_user_accounts,
    create_account,
    update_account,
    delete_account,
)
from app.utils.permissions import authenticated_user, object_permission
from app.utils.responses import validation_error_response
from app.utils.pagination import paginate
from app.utils.logger import logger


class AccountListResource(Resource):
    """Resource for listing and creating accounts"""

    method_decorators = [authenticated_user]

    def get(self):
        query = get_user_accounts(g.user)
        return paginate(query, accounts_schema, endpoint="account.accounts")

    def post(self):
        try:
            data = request.get_json() or {}

            logger.info(f"User {g.user.id} creating account: {data}")

            account = account_schema.load(data)
            result = create_account(account, g.user)

            if isinstance(result, tuple) and len(result) == 2:
                return result

            return account_schema.dump(result), 201

        except ValidationError as err:
            return validation_error_response(err)


class AccountDetailResource(Resource):
    """Resource for retrieving, updating and deleting an account"""

    method_decorators = [
        object_permission(Account),
        authenticated_user,
    ]

    def get(self, id):
        return account_schema.dump(g.object), 200

    def patch(self, id):
        try:
            data = request.get_json() or {}

            logger.info(f"User {g.user.id} updating account {id}: {data}")

            account = account_update_schema.load(data, instance=g.object, partial=True)
            result = update_account(account)

            if isinstance(result, tuple) and len(result) == 2:
                return result

            return account_schema.dump(result), 200

        except ValidationError as err:
            return validation_error_response(err)

    def delete(self, id):
        logger.info(f"User {g.user.id} deleting account {id}")

        result = delete_account(g.object)
        if result:
            return result

        return "", 204
