from app.extensions import db
from app.models.base import BaseModel
from app.utils.enums import CategoryType


class Category(BaseModel):
    """Income or expense category owned by a user"""

    __tablename__ = "categories"

    name = db.Column(db.String(100), nullable=False)
    type = db.Column(db.Enum(CategoryType, name="category_type"), nullable=False)
    icon = db.Column(db.String(16), nullable=True)
    user_id = db.Column(
        db.UUID(as_uuid=True),
        db.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    user = db.relationship(
        "User",
        backref=db.backref("categories", lazy="dynamic", cascade="all, delete"),
    )

    __table_args__ = (
        db.UniqueConstraint("user_id", "name", name="unique_user_category_name"),
    )

    def __repr__(self):
        return f"<Category {self.name} ({self.type.value})>"
