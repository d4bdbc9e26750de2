from app.extensions import db
from app.models.base import BaseModel


class ActiveAccessToken(BaseModel):
    """An issued access token; the row lives as long as the session does"""

    __tablename__ = "active_access_tokens"

    access_token = db.Column(db.Text, nullable=False, unique=True)
    user_id = db.Column(
        db.UUID(as_uuid=True),
        db.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    user = db.relationship(
        "User",
        backref=db.backref("access_tokens", lazy="dynamic", cascade="all, delete"),
    )

    def __repr__(self):
        return f"<ActiveAccessToken user:{self.user_id}>"
