from flask import Blueprint
from flask_restful import Api, Resource
from redis.exceptions import RedisError
from sqlalchemy import inspect, text
from sqlalchemy.exc import OperationalError

from app.extensions import db, redis_client
from app.utils.logger import logger

health_bp = Blueprint("health", __name__)
health_api = Api(health_bp)


def _redis_status():
    """Redis only backs the catch-up lock, so an outage is reported, not fatal"""
    try:
        redis_client.ping()
        return "ok"
    except RedisError as e:
        logger.warning(f"Health check: Redis unavailable: {str(e)}")
        return "unavailable"


class HealthCheckResource(Resource):
    def get(self):
        try:
            db.session.execute(text("SELECT 1"))
            num_tables = len(inspect(db.engine).get_table_names())
        except OperationalError as e:
            logger.error(f"Health check: database unreachable: {str(e)}")
            return {"message": "Database connection failed", "error": str(e)}, 500

        if num_tables == 0:
            return {"message": "No tables found in the database"}, 500

        return {
            "message": "Database is healthy",
            "table_count": num_tables,
            "redis": _redis_status(),
        }, 200


health_api.add_resource(HealthCheckResource, "/health-check")
