from flask import Blueprint
from flask_restful import Api
from app.resources.dashboard import DashboardResource


dashboard_bp = Blueprint("dashboard", __name__)
dashboard_api = Api(dashboard_bp)

dashboard_api.add_resource(DashboardResource, "", endpoint="dashboard")
