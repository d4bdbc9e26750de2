import re
from flask_jwt_extended import create_access_token
from marshmallow.exceptions import ValidationError
from app.models.auth import ActiveAccessToken
from app.models.user import User
from app.utils.logger import logger
from app.extensions import db


def is_email(login_str):
    """Check if string is an email format."""
    # Simple regex for basic email validation
    email_regex = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"
    return re.match(email_regex, login_str) is not None


def create_user(user):
    """Persist a freshly loaded user with a hashed password"""
    user.set_password(user.password)

    db.session.add(user)
    db.session.commit()

    logger.info(f"User created: {user.id}")
    return user


def authenticate_user(login_identifier, password):
    """
    Authenticate a user by username or email and password.
    """
    # Determine if the login identifier is an email or username
    if is_email(login_identifier):
        user = User.query.filter_by(email=login_identifier).first()
        identifier_type = "email"
    else:
        user = User.query.filter_by(username=login_identifier).first()
        identifier_type = "username"

    if not user:
        logger.warning(
            f"Login attempt with non-existent {identifier_type}: {login_identifier}"
        )
        raise ValidationError("Invalid username/email or password")

    if not user.check_password(password):
        logger.warning(f"Failed login attempt for user: {login_identifier}")
        raise ValidationError("Invalid username/email or password")

    logger.info(f"User authenticated successfully: {login_identifier}")
    return user


def open_session(user):
    """Issue an access token and record it as the user's live session"""
    access_token = create_access_token(identity=str(user.id))

    db.session.add(ActiveAccessToken(access_token=access_token, user_id=user.id))
    db.session.commit()

    logger.info(f"Opened session for user: {user.username}")
    return {"access_token": access_token}


def close_session(access_token):
    """Delete the session row of the token; the token stops working at once"""
    deleted = ActiveAccessToken.query.filter_by(access_token=access_token).delete()
    db.session.commit()

    logger.info(f"Closed {deleted} session(s)")
    return deleted
