from flask import Blueprint
from flask_restful import Api
from app.resources.auth import SignupResource, LoginResource, LogoutResource


auth_bp = Blueprint("auth", __name__)
auth_api = Api(auth_bp)

auth_api.add_resource(SignupResource, "/signup", endpoint="signup")
auth_api.add_resource(LoginResource, "/login", endpoint="login")
auth_api.add_resource(LogoutResource, "/logout", endpoint="logout")
