import uuid

from marshmallow import ValidationError

from app.utils.logger import logger
from app.utils.validators import is_valid_uuid


def fetch_user_resources(model_class, user, user_field="user_id"):
    """
    Base query for a model, scoped to the rows owned by the given user.

    Args:
        model_class: The SQLAlchemy model class to query
        user: The authenticated user requesting resources
        user_field: Name of the field in the model that references the user

    Returns:
        SQLAlchemy query object filtered by owner
    """
    logger.info(f"Fetching {model_class.__name__}s for user {user.id}")
    return model_class.query.filter(getattr(model_class, user_field) == user.id)


def filter_by_uuid_param(query, column, query_params, name):
    """Apply an equality filter for a UUID query parameter when it is present"""
    value = query_params.get(name)
    if not value:
        return query

    if not is_valid_uuid(value):
        raise ValidationError(f"Invalid {name} format {value}")

    return query.filter(column == uuid.UUID(value))


def parse_bool_param(value, name):
    """Parse a 'true'/'false' query parameter"""
    normalized = str(value).strip().lower()
    if normalized in ("true", "1", "yes"):
        return True
    if normalized in ("false", "0", "no"):
        return False
    raise ValidationError(f"Invalid {name} value: {value}")
