from flask_restful import Resource
from flask import g

from app.schemas.dashboard import dashboard_schema
from app.services.dashboard import get_dashboard
from app.utils.permissions import authenticated_user


class DashboardResource(Resource):
    """
    The primary authenticated view. Due recurring payments are materialized
    before anything is read, so the response already contains them.
    """

    method_decorators = [authenticated_user]

    def get(self):
        summary = get_dashboard(g.user, g.access_token)
        return dashboard_schema.dump(summary), 200
