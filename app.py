from api import create_app
from api.models import db

app = create_app()

if __name__ == '__main__':
    try:
        app.run(host=app.config['HOST'], port=app.config['PORT'])
    finally:
        # release pooled connections on shutdown
        with app.app_context():
            db.engine.dispose()
