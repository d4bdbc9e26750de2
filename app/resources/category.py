from flask_restful import Resource
from flask import g, request
from marshmallow import ValidationError

from app.models.category import Category
from app.schemas.category import category_schema, categories_schema
from app.services.category import (
    get_user_categories,
    create_category,
    delete_category,
)
from app.utils.permissions import authenticated_user, object_permission
from app.utils.responses import validation_error_response
from app.utils.pagination import paginate
from app.utils.logger import logger


class CategoryListResource(Resource):
    """Resource for listing and creating categories"""

    method_decorators = [authenticated_user]

    def get(self):
        try:
            query_params = request.args.to_dict()
            query = get_user_categories(g.user, query_params)

            filters = {
                key: value
                for key, value in query_params.items()
                if key not in ("page", "per_page")
            }
            return paginate(
                query, categories_schema, endpoint="category.categories", **filters
            )

        except ValidationError as err:
            return validation_error_response(err)

    def post(self):
        try:
            data = request.get_json() or {}

            logger.info(f"User {g.user.id} creating category: {data}")

            category = category_schema.load(data)
            result = create_category(category, g.user)

            if isinstance(result, tuple) and len(result) == 2:
                return result

            return category_schema.dump(result), 201

        except ValidationError as err:
            return validation_error_response(err)


class CategoryDetailResource(Resource):
    """Resource for retrieving and deleting a category"""

    method_decorators = [
        object_permission(Category),
        authenticated_user,
    ]

    def get(self, id):
        return category_schema.dump(g.object), 200

    def delete(self, id):
        logger.info(f"User {g.user.id} deleting category {id}")

        result = delete_category(g.object)
        if result:
            return result

        return "", 204
