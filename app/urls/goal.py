from flask import Blueprint
from flask_restful import Api
from app.resources.goal import (
    GoalListResource,
    GoalDetailResource,
    GoalContributionResource,
    GoalPinResource,
)


goal_bp = Blueprint("goal", __name__)
goal_api = Api(goal_bp)

goal_api.add_resource(GoalListResource, "", endpoint="goals")
goal_api.add_resource(GoalDetailResource, "/<id>", endpoint="goal-detail")
goal_api.add_resource(
    GoalContributionResource, "/<id>/contributions", endpoint="goal-contributions"
)
goal_api.add_resource(GoalPinResource, "/<id>/pin", endpoint="goal-pin")
