from flask import Blueprint
from marshmallow import ValidationError

from api.routes.utils import parse_id, read_json
from api.schemas.actor import actor_schema, actors_schema
from api.schemas.film import films_schema
from api.storage import get_storage

actors_router = Blueprint("actors", __name__)

@actors_router.get("/actors")
def read_all_actors():
    return actors_schema.dump(get_storage().list_actors())

@actors_router.post("/actor")
def create_actor():
    try:
        actor_data = actor_schema.load(read_json())
    except ValidationError as err:
        return {"error": err.messages}, 400

    storage = get_storage()
    actor_id = storage.create_actor(actor_data)
    return actor_schema.dump(storage.get_actor(actor_id)), 201

@actors_router.get("/actor/", defaults={"actor_id": ""})
@actors_router.get("/actor/<actor_id>")
def read_actor(actor_id):
    actor = get_storage().get_actor(parse_id(actor_id, "actor"))
    return actor_schema.dump(actor)

@actors_router.patch("/actor/", defaults={"actor_id": ""})
@actors_router.patch("/actor/<actor_id>")
def partial_update_actor(actor_id):
    actor_id = parse_id(actor_id, "actor")
    try:
        changes = actor_schema.load(read_json(), partial=True) # validate dict against schema
    except ValidationError as err:
        return {"error": err.messages}, 400

    storage = get_storage()
    storage.update_actor(actor_id, changes)
    return actor_schema.dump(storage.get_actor(actor_id)), 200

@actors_router.delete("/actor/", defaults={"actor_id": ""})
@actors_router.delete("/actor/<actor_id>")
def delete_actor(actor_id):
    actor_id = parse_id(actor_id, "actor")
    get_storage().delete_actor(actor_id)
    return {"message": f"Actor {actor_id} deleted"}, 200

@actors_router.get("/actor_films/", defaults={"actor_id": ""})
@actors_router.get("/actor_films/<actor_id>")
def read_actor_films(actor_id):
    films = get_storage().list_films_by_actor(parse_id(actor_id, "actor"))
    return films_schema.dump(films), 200
