from marshmallow import ValidationError
from werkzeug.exceptions import HTTPException

from app.extensions import db
from app.utils.logger import logger
from app.utils.responses import validation_error_response


def handle_error(app):
    """Register the global error handlers on the app"""

    @app.errorhandler(ValidationError)
    def handle_validation_error(err):
        logger.warning(f"Validation error: {err.messages}")
        return validation_error_response(err)

    @app.errorhandler(HTTPException)
    def handle_http_exception(err):
        return {"error": err.description}, err.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(err):
        db.session.rollback()
        logger.error(f"Unhandled exception: {str(err)}", exc_info=True)
        return {"error": "Internal server error"}, 500
