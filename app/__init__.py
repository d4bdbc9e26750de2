from flask import Flask, request

from app.config import Config  # Import configuration settings
from app.extensions import db, migrate, bcrypt, jwt, ma, init_redis
from app.urls import register_blueprints
from app.utils.exception_handler import handle_error
from app.utils.jwt_handlers import register_jwt_error_handlers
from app.utils.logger import logger
from app.utils.validators import is_valid_uuid


def create_app(test_config=None):
    """
    Build the finance API.

    Args:
        test_config: configuration object used instead of Config (tests)
    """
    app = Flask(__name__)
    app.config.from_object(test_config or Config)
    app.config["PROPAGATE_EXCEPTIONS"] = True

    db.init_app(app)
    migrate.init_app(app, db)
    # Schemas need db.session, so marshmallow comes after SQLAlchemy
    ma.init_app(app)
    bcrypt.init_app(app)
    jwt.init_app(app)
    init_redis(app)

    register_jwt_error_handlers(app)
    register_blueprints(app)
    handle_error(app)

    @app.before_request
    def validate_uuid_params():
        # Every detail route is keyed by a UUID path parameter named 'id'
        if request.view_args and "id" in request.view_args:
            id_value = request.view_args["id"]
            if not is_valid_uuid(id_value):
                return {
                    "error": f"Invalid id format, it must be a UUID: {id_value}"
                }, 400

    logger.info(f"App created (testing={app.config.get('TESTING', False)})")
    return app


# importing all the models
from app import models
