from flask_restful import Resource
from flask import g, request
from marshmallow import ValidationError

from app.models.goal import Goal
from app.schemas.goal import (
    goal_schema,
    goals_schema,
    goal_update_schema,
    goal_contribution_schema,
)
from app.services.goal import (
    get_user_goals,
    create_goal,
    update_goal,
    contribute_to_goal,
    pin_goal,
    delete_goal,
)
from app.utils.permissions import authenticated_user, object_permission
from app.utils.responses import validation_error_response
from app.utils.pagination import paginate
from app.utils.logger import logger


def _respond(result, status=200):
    if isinstance(result, tuple) and len(result) == 2:
        return result
    return goal_schema.dump(result), status


class GoalListResource(Resource):
    """Resource for listing and creating savings goals"""

    method_decorators = [authenticated_user]

    def get(self):
        try:
            query_params = request.args.to_dict()
            query = get_user_goals(g.user, query_params)

            filters = {
                key: value
                for key, value in query_params.items()
                if key not in ("page", "per_page")
            }
            return paginate(query, goals_schema, endpoint="goal.goals", **filters)

        except ValidationError as err:
            return validation_error_response(err)

    def post(self):
        try:
            data = request.get_json() or {}

            logger.info(f"User {g.user.id} creating goal: {data}")

            goal = goal_schema.load(data)
            return _respond(create_goal(goal, g.user), 201)

        except ValidationError as err:
            return validation_error_response(err)


class GoalDetailResource(Resource):
    """Resource for retrieving, updating and deleting a goal"""

    method_decorators = [object_permission(Goal), authenticated_user]

    def get(self, id):
        logger.info(f"User {g.user.id} retrieved goal {id}")
        return goal_schema.dump(g.object), 200

    def patch(self, id):
        """Rename a goal or change its icon, target or deadline"""
        try:
            data = request.get_json() or {}

            logger.info(f"User {g.user.id} updating goal {id}: {data}")

            updated_goal = goal_update_schema.load(
                data, instance=g.object, partial=True
            )
            return _respond(update_goal(updated_goal))

        except ValidationError as err:
            return validation_error_response(err)

    def delete(self, id):
        logger.info(f"User {g.user.id} deleting goal {id}")

        result = delete_goal(g.object)
        if result:
            return result

        return "", 204


class GoalContributionResource(Resource):
    """Deposits into and withdrawals from a goal"""

    method_decorators = [object_permission(Goal), authenticated_user]

    def post(self, id):
        try:
            data = goal_contribution_schema.load(request.get_json() or {})

            logger.info(f"User {g.user.id} moving {data['amount']} on goal {id}")

            return _respond(contribute_to_goal(g.object, data["amount"]))

        except ValidationError as err:
            return validation_error_response(err)


class GoalPinResource(Resource):
    """PUT pins the goal (unpinning the others), DELETE unpins it"""

    method_decorators = [object_permission(Goal), authenticated_user]

    def put(self, id):
        return _respond(pin_goal(g.object))

    def delete(self, id):
        return _respond(pin_goal(g.object, pinned=False))
