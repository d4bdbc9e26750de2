from flask import request, url_for

from app.utils.constants import MAX_PAGE_SIZE


def _read_positive_int(name, default):
    """Read a positive integer query parameter, falling back to the default"""
    try:
        value = int(request.args.get(name, default))
    except (ValueError, TypeError):
        return default
    return value if value > 0 else default


def paginate(query, schema, endpoint=None, **url_params):
    """
    Paginate a query and serialise the current page.

    Args:
        query: SQLAlchemy query object
        schema: Marshmallow schema (many=True) used to dump the items
        endpoint: Endpoint name used to build previous/next links
        **url_params: Extra URL parameters kept in the links

    Returns:
        Dict with the page metadata, previous/next links and the items
    """
    page = _read_positive_int("page", 1)
    per_page = min(_read_positive_int("per_page", 10), MAX_PAGE_SIZE)

    pagination = query.paginate(page=page, per_page=per_page, error_out=False)

    previous_link = next_link = None
    if endpoint:
        if pagination.has_prev:
            previous_link = url_for(
                endpoint, page=page - 1, per_page=per_page, _external=True, **url_params
            )
        if pagination.has_next:
            next_link = url_for(
                endpoint, page=page + 1, per_page=per_page, _external=True, **url_params
            )

    return {
        "total_items": pagination.total,
        "total_pages": pagination.pages,
        "current_page": page,
        "per_page": per_page,
        "previous": previous_link,
        "next": next_link,
        "data": schema.dump(pagination.items),
    }
