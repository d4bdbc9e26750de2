def validation_error_response(err):
    """Format a marshmallow ValidationError as an API error response"""
    return {"error": err.messages}, 400
