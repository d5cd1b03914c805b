import logging

from flask import Flask

from api.config import config
from api.errors import ApiError, handle_api_error
from api.models import db
from api.routes import routes
from api.schemas import ma
from api.storage import Storage

LOG_FORMAT = '%(asctime)s : %(name)s - %(levelname)s - %(message)s'

logger = logging.getLogger(__name__)


def create_app(config_object=None):
    app = Flask(__name__)
    app.config.from_object(config_object or config)

    logging.basicConfig(level=app.config['LOG_LEVEL'], format=LOG_FORMAT)

    db.init_app(app)
    ma.init_app(app)
    app.extensions['storage'] = Storage(db)

    app.register_blueprint(routes)
    app.register_error_handler(ApiError, handle_api_error)

    with app.app_context():
        db.create_all()
    logger.info('database schema ready')

    return app
