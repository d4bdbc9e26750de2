from app.extensions import db, bcrypt
from app.models.base import BaseModel
from app.utils.logger import logger


class User(BaseModel):
    """Owner of accounts, categories, transactions and recurring rules"""

    __tablename__ = "users"

    username = db.Column(db.String(120), unique=True, nullable=False)
    email = db.Column(db.String(120), unique=True, nullable=False)
    password = db.Column(db.String(255), nullable=False)
    name = db.Column(db.String(100), nullable=False)
    # ISO 4217 code used to display every amount of the user
    currency = db.Column(db.String(3), nullable=False, default="EUR")

    def set_password(self, password):
        """Store the bcrypt hash of the plain password"""
        self.password = bcrypt.generate_password_hash(password).decode("utf-8")
        logger.debug(f"Password hashed for user {self.username}")

    def check_password(self, password):
        return bcrypt.check_password_hash(self.password, password)

    def __repr__(self):
        return f"<User {self.username} ({self.currency})>"
