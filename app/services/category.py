from marshmallow import ValidationError

from app.extensions import db
from app.models.category import Category
from app.services.common import fetch_user_resources
from app.utils.constants import DEFAULT_CATEGORIES
from app.utils.enums import CategoryType
from app.utils.logger import logger


def get_user_categories(user, query_params=None):
    """
    Get categories for a user with optional filters
    """
    query_params = query_params or {}
    logger.info(f"Getting categories for user {user.id} with filters: {query_params}")

    query = fetch_user_resources(Category, user)

    if query_params.get("type"):
        try:
            category_type = CategoryType(query_params["type"])
        except ValueError:
            raise ValidationError(f"Invalid category type: {query_params['type']}")
        query = query.filter(Category.type == category_type)

    return query.order_by(Category.type, Category.name)


def create_category(category, user):
    try:
        category.user_id = user.id

        db.session.add(category)
        db.session.commit()

        logger.info(f"Created category {category.id} for user {user.id}")
        return category

    except Exception as e:
        db.session.rollback()
        logger.error(f"Error creating category: {str(e)}")
        return {"error": f"Failed to create category: {str(e)}"}, 500


def delete_category(category):
    try:
        db.session.delete(category)
        db.session.commit()
        logger.info(f"Deleted category {category.id}")
        return None

    except Exception as e:
        db.session.rollback()
        logger.error(f"Error deleting category: {str(e)}")
        return {"error": f"Failed to delete category: {str(e)}"}, 500


def ensure_default_categories(user):
    """
    Give a user with no categories the default income and expense set.

    Returns:
        int: number of categories created
    """
    if fetch_user_resources(Category, user).count() > 0:
        return 0

    try:
        for default in DEFAULT_CATEGORIES:
            db.session.add(Category(user_id=user.id, **default))
        db.session.commit()

    except Exception as e:
        db.session.rollback()
        logger.error(f"Error creating default categories for user {user.id}: {str(e)}")
        return 0

    logger.info(f"Created {len(DEFAULT_CATEGORIES)} default categories for user {user.id}")
    return len(DEFAULT_CATEGORIES)
