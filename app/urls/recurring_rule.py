from flask import Blueprint
from flask_restful import Api
from app.resources.recurring_rule import (
    RecurringRuleListResource,
    RecurringRuleDetailResource,
    RecurringRuleUpcomingResource,
)


recurring_rule_bp = Blueprint("recurring_rule", __name__)
recurring_rule_api = Api(recurring_rule_bp)

recurring_rule_api.add_resource(
    RecurringRuleListResource, "", endpoint="recurring_rules"
)
recurring_rule_api.add_resource(
    RecurringRuleDetailResource, "/<id>", endpoint="recurring-rule-detail"
)
recurring_rule_api.add_resource(
    RecurringRuleUpcomingResource, "/<id>/upcoming", endpoint="recurring-rule-upcoming"
)
