import uuid
from functools import wraps

from flask import g, request
from flask_jwt_extended import jwt_required

from app.extensions import db
from app.models.auth import ActiveAccessToken
from app.utils.logger import logger


def get_bearer_token():
    """Extract the raw bearer token from the Authorization header"""
    header = request.headers.get("Authorization", "")
    parts = header.split(" ")
    return parts[1] if len(parts) == 2 else None


def authenticated_user(fn):
    @wraps(fn)
    @jwt_required()
    def wrapper(*args, **kwargs):
        token = get_bearer_token()
        token_entry = ActiveAccessToken.query.filter_by(access_token=token).first()

        if not token_entry or not token_entry.user:
            logger.error("Authentication failed: token has no active session")
            return {"error": "Invalid authorization detail."}, 401

        # Set user and session token in context
        g.user = token_entry.user
        g.access_token = token

        logger.info(f"User authenticated successfully: {g.user.id}")
        return fn(*args, **kwargs)

    return wrapper


def object_permission(model_class, id_param="id"):
    """
    Load the object named by the URL parameter and make sure it belongs to
    the authenticated user. Objects of other users answer 404.
    """

    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            object_id = kwargs.get(id_param)
            if not object_id:
                logger.warning(f"Missing {id_param} in request")
                return {"error": "Missing object ID"}, 400

            obj = db.session.get(model_class, uuid.UUID(object_id))

            if not obj or obj.user_id != g.user.id:
                logger.error(
                    f"{model_class.__name__} {object_id} not accessible for user {g.user.id}"
                )
                return {"error": f"{model_class.__name__} not found."}, 404

            g.object = obj
            logger.info(
                f"Permission granted for user {g.user.id} on {model_class.__name__} {obj.id} ({request.method})"
            )
            return fn(*args, **kwargs)

        return wrapper

    return decorator
