import uuid

from marshmallow import ValidationError

from app.extensions import db


def is_valid_uuid(value):
    """Check whether the given value can be parsed as a UUID"""
    try:
        uuid.UUID(str(value))
        return True
    except (ValueError, TypeError, AttributeError):
        return False


def validate_signed_amount(value, max_abs_value):
    """Amounts are signed; zero and out-of-range magnitudes are rejected"""
    if value == 0:
        raise ValidationError("Amount cannot be zero")
    if abs(value) > max_abs_value:
        raise ValidationError(f"Amount magnitude must not exceed {max_abs_value}")


def find_owned(model_class, object_id, user):
    """Return the object when it exists and belongs to the user, else None"""
    if object_id is None or not is_valid_uuid(object_id):
        return None
    obj = db.session.get(model_class, uuid.UUID(str(object_id)))
    if not obj or obj.user_id != user.id:
        return None
    return obj
