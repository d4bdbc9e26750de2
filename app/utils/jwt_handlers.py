from app.extensions import jwt
from app.utils.logger import logger


def register_jwt_error_handlers(app):
    """Return JSON bodies for every JWT failure instead of the defaults"""

    @jwt.unauthorized_loader
    def missing_token_callback(reason):
        logger.warning(f"Missing authorization header: {reason}")
        return {"error": "Authorization token is missing."}, 401

    @jwt.invalid_token_loader
    def invalid_token_callback(reason):
        logger.warning(f"Invalid token: {reason}")
        return {"error": "Invalid authorization token."}, 401

    @jwt.expired_token_loader
    def expired_token_callback(jwt_header, jwt_payload):
        logger.info(f"Expired token for identity {jwt_payload.get('sub')}")
        return {"error": "Token has expired."}, 401

    @jwt.revoked_token_loader
    def revoked_token_callback(jwt_header, jwt_payload):
        return {"error": "Token has been revoked."}, 401
