from flask_restful import Resource
from flask import g, request
from marshmallow import ValidationError

from app.models.transaction import Transaction
from app.schemas.transaction import transaction_schema, transactions_schema
from app.services.transaction import (
    get_user_transactions,
    create_transaction,
    delete_transaction,
)
from app.utils.permissions import authenticated_user, object_permission
from app.utils.responses import validation_error_response
from app.utils.pagination import paginate
from app.utils.logger import logger


class TransactionListResource(Resource):
    """Resource for listing and creating transactions"""

    method_decorators = [authenticated_user]

    def get(self):
        """Get paginated list of transactions with filtering"""
        try:
            query_params = request.args.to_dict()
            query = get_user_transactions(g.user, query_params)

            filters = {
                key: value
                for key, value in query_params.items()
                if key not in ("page", "per_page")
            }
            return paginate(
                query,
                transactions_schema,
                endpoint="transaction.transactions",
                **filters,
            )

        except ValidationError as err:
            return validation_error_response(err)

    def post(self):
        """Record a manual transaction"""
        try:
            data = request.get_json() or {}

            logger.info(f"User {g.user.id} creating transaction: {data}")

            transaction = transaction_schema.load(data)
            result = create_transaction(transaction, g.user)

            if isinstance(result, tuple) and len(result) == 2:
                return result

            return transaction_schema.dump(result), 201

        except ValidationError as err:
            return validation_error_response(err)


class TransactionDetailResource(Resource):
    """Resource for retrieving and deleting a transaction"""

    method_decorators = [
        object_permission(Transaction),
        authenticated_user,
    ]

    def get(self, id):
        logger.info(f"User {g.user.id} retrieved transaction {id}")
        return transaction_schema.dump(g.object), 200

    def delete(self, id):
        logger.info(f"User {g.user.id} deleting transaction {id}")

        result = delete_transaction(g.object)
        if result:
            return result

        return "", 204
