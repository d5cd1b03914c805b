import sqlite3

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import event
from sqlalchemy.engine import Engine

db = SQLAlchemy()

# largest value an INTEGER column holds on every backend we run on
MAX_INT = 2**31 - 1

# sqlite ignores foreign keys (and ON DELETE CASCADE) unless asked per connection
@event.listens_for(Engine, "connect")
def enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

# imported after db; all models must be registered before any mapper is inspected
from api.models.film_actor import film_actor  # noqa: E402
from api.models.actor import Actor  # noqa: E402
from api.models.film import Film  # noqa: E402
