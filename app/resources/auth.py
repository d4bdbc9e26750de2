from flask_restful import Resource
from flask import request
from marshmallow import ValidationError

from app.schemas.auth import user_schema, login_schema
from app.services.auth import authenticate_user, create_user, open_session, close_session
from app.utils.permissions import authenticated_user, get_bearer_token
from app.utils.responses import validation_error_response
from app.utils.logger import logger


class SignupResource(Resource):
    def post(self):
        try:
            data = request.get_json() or {}
            user = user_schema.load(data)
            user = create_user(user)

            logger.info(f"User signed up: {user.id}")
            return user_schema.dump(user), 201

        except ValidationError as err:
            return validation_error_response(err)


class LoginResource(Resource):
    def post(self):
        try:
            data = login_schema.load(request.get_json() or {})
            user = authenticate_user(data["username"], data["password"])
            return open_session(user), 200

        except ValidationError as err:
            return validation_error_response(err)


class LogoutResource(Resource):
    method_decorators = [authenticated_user]

    def post(self):
        close_session(get_bearer_token())
        return {"message": "Successfully logged out."}, 200
