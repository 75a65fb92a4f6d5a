"""Flask extensions initialization."""

from flask_marshmallow import Marshmallow
from flask_sqlalchemy import SQLAlchemy


# SQLAlchemy database instance, bound to the app in create_app
db = SQLAlchemy()

# Marshmallow serialization instance
ma = Marshmallow()
