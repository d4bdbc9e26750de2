from flask_restful import Resource
from flask import g, request
from marshmallow import ValidationError

from app.models.budget import Budget
from app.schemas.budget import budget_schema, budgets_schema, budget_update_schema
from app.services.budget import (
    get_user_budgets,
    create_budget,
    update_budget,
    delete_budget,
)
from app.utils.permissions import authenticated_user, object_permission
from app.utils.responses import validation_error_response
from app.utils.pagination import paginate
from app.utils.logger import logger


class BudgetListResource(Resource):
    """Resource for listing and creating budgets"""

    method_decorators = [authenticated_user]

    def get(self):
        """Get paginated list of budgets with filtering"""
        try:
            query_params = request.args.to_dict()
            query = get_user_budgets(g.user, query_params)

            filters = {
                key: value
                for key, value in query_params.items()
                if key not in ("page", "per_page")
            }
            return paginate(query, budgets_schema, endpoint="budget.budgets", **filters)

        except ValidationError as err:
            return validation_error_response(err)

    def post(self):
        """Create a new budget"""
        try:
            data = request.get_json() or {}

            logger.info(f"User {g.user.id} creating budget: {data}")

            budget = budget_schema.load(data)
            result = create_budget(budget, g.user)

            if isinstance(result, tuple) and len(result) == 2:
                return result

            return budget_schema.dump(result), 201

        except ValidationError as err:
            return validation_error_response(err)


class BudgetDetailResource(Resource):
    """Resource for retrieving, updating and deleting a budget"""

    method_decorators = [object_permission(Budget), authenticated_user]

    def get(self, id):
        """Get a budget with its spending for the month"""
        logger.info(f"User {g.user.id} retrieved budget {id}")
        return budget_schema.dump(g.object), 200

    def patch(self, id):
        """Change the limit of a budget"""
        try:
            data = request.get_json() or {}

            logger.info(f"User {g.user.id} updating budget {id}: {data}")

            updated_budget = budget_update_schema.load(
                data, instance=g.object, partial=True
            )
            result = update_budget(updated_budget)

            if isinstance(result, tuple) and len(result) == 2:
                return result

            return budget_schema.dump(result), 200

        except ValidationError as err:
            return validation_error_response(err)

    def delete(self, id):
        logger.info(f"User {g.user.id} deleting budget {id}")

        result = delete_budget(g.object)
        if result:
            return result

        return "", 204
