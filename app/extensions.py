import redis
from flask_bcrypt import Bcrypt
from flask_jwt_extended import JWTManager
from flask_marshmallow import Marshmallow
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy


db = SQLAlchemy()
migrate = Migrate()
jwt = JWTManager()
bcrypt = Bcrypt()
ma = Marshmallow()

# Shared client; init_redis points it at the configured server.
# Connections are opened lazily, on the first command.
redis_client = redis.StrictRedis(decode_responses=True)


def init_redis(app):
    redis_client.connection_pool = redis.ConnectionPool(
        host=app.config["REDIS_HOST"],
        port=app.config["REDIS_PORT"],
        db=app.config["REDIS_DB"],
        socket_timeout=app.config["REDIS_SOCKET_TIMEOUT"],
        decode_responses=True,
    )
