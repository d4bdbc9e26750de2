from flask_restful import Resource
from flask import g, request
from marshmallow import ValidationError

from app.models.recurring_rule import RecurringRule
from app.schemas.recurring_rule import (
    recurring_rule_schema,
    recurring_rules_schema,
    recurring_rule_update_schema,
    upcoming_payments_schema,
)
from app.services.recurring_rule import (
    get_user_recurring_rules,
    create_recurring_rule,
    update_recurring_rule,
    delete_recurring_rule,
    upcoming_due_dates,
)
from app.utils.permissions import authenticated_user, object_permission
from app.utils.responses import validation_error_response
from app.utils.pagination import paginate
from app.utils.logger import logger


class RecurringRuleListResource(Resource):
    """Resource for listing and creating recurring rules"""

    method_decorators = [authenticated_user]

    def get(self):
        """Get paginated list of recurring rules with filtering"""
        try:
            query_params = request.args.to_dict()
            query = get_user_recurring_rules(g.user, query_params)

            filters = {
                key: value
                for key, value in query_params.items()
                if key not in ("page", "per_page")
            }
            return paginate(
                query,
                recurring_rules_schema,
                endpoint="recurring_rule.recurring_rules",
                **filters,
            )

        except ValidationError as err:
            return validation_error_response(err)

    def post(self):
        """Create a new recurring rule"""
        try:
            data = request.get_json() or {}

            logger.info(f"User {g.user.id} creating recurring rule: {data}")

            recurring_rule = recurring_rule_schema.load(data)
            result = create_recurring_rule(recurring_rule, g.user)

            if isinstance(result, tuple) and len(result) == 2:
                return result

            logger.info(
                f"Recurring rule created successfully with ID {result.id} by user {g.user.id}"
            )
            return recurring_rule_schema.dump(result), 201

        except ValidationError as err:
            return validation_error_response(err)


class RecurringRuleDetailResource(Resource):
    """Resource for retrieving, updating and deleting a recurring rule"""

    method_decorators = [
        object_permission(RecurringRule),
        authenticated_user,
    ]

    def get(self, id):
        """Get a specific recurring rule"""
        logger.info(f"User {g.user.id} retrieved recurring rule {id}")
        return recurring_rule_schema.dump(g.object), 200

    def patch(self, id):
        """Edit amount or description, or pause/resume a recurring rule"""
        try:
            data = request.get_json() or {}

            logger.info(f"User {g.user.id} updating recurring rule {id}: {data}")

            updated_rule = recurring_rule_update_schema.load(
                data, instance=g.object, partial=True
            )
            result = update_recurring_rule(updated_rule, data)

            if isinstance(result, tuple) and len(result) == 2:
                return result

            return recurring_rule_schema.dump(result), 200

        except ValidationError as err:
            return validation_error_response(err)

    def delete(self, id):
        """Delete a recurring rule, keeping the transactions it generated"""
        logger.info(f"User {g.user.id} deleting recurring rule {id}")

        result = delete_recurring_rule(g.object)
        if result:
            return result

        return "", 204


class RecurringRuleUpcomingResource(Resource):
    """Resource projecting the next occurrences of a recurring rule"""

    method_decorators = [
        object_permission(RecurringRule),
        authenticated_user,
    ]

    def get(self, id):
        try:
            params = upcoming_payments_schema.load(request.args.to_dict())
        except ValidationError as err:
            return validation_error_response(err)

        due_dates = upcoming_due_dates(g.object, params["count"])
        return {
            "recurring_rule_id": str(g.object.id),
            "frequency": g.object.frequency.value,
            "due_dates": [due_date.isoformat() for due_date in due_dates],
        }, 200
