from flask import Blueprint

from api.routes.actors import actors_router
from api.routes.films import films_router

routes = Blueprint('api', __name__, url_prefix='/api/v1')

routes.register_blueprint(actors_router)
routes.register_blueprint(films_router)

@routes.get("/health")
def health():
    return {"status": "ok"}
