from flask import Blueprint
from marshmallow import ValidationError

from api.routes.utils import parse_id, read_json
from api.schemas.actor import actors_schema
from api.schemas.film import create_film_schema, film_schema, films_schema
from api.storage import get_storage

# Blueprint gets inserted into the versioned api blueprint
films_router = Blueprint("films", __name__)

@films_router.get("/films")
def read_all_films():
    return films_schema.dump(get_storage().list_films())

@films_router.post("/film")
def create_film():
    try:
        film_data = create_film_schema.load(read_json())
    except ValidationError as err:
        return {"error": err.messages}, 400

    storage = get_storage()
    film_id = storage.create_film(film_data)
    return film_schema.dump(storage.get_film(film_id)), 201

@films_router.get("/film/", defaults={"film_id": ""})
@films_router.get("/film/<film_id>")
def read_film(film_id):
    film = get_storage().get_film(parse_id(film_id, "film"))
    return film_schema.dump(film)

@films_router.patch("/film/", defaults={"film_id": ""})
@films_router.patch("/film/<film_id>")
def partial_update_film(film_id):
    film_id = parse_id(film_id, "film")
    try:
        # only the keys present in the body are touched
        changes = film_schema.load(read_json(), partial=True)
    except ValidationError as err:
        return {"error": err.messages}, 400

    storage = get_storage()
    storage.update_film(film_id, changes)
    return film_schema.dump(storage.get_film(film_id)), 200

@films_router.delete("/film/", defaults={"film_id": ""})
@films_router.delete("/film/<film_id>")
def delete_film(film_id):
    film_id = parse_id(film_id, "film")
    get_storage().delete_film(film_id)
    return {"message": f"Film {film_id} deleted"}, 200

@films_router.get("/film_actors/", defaults={"film_id": ""})
@films_router.get("/film_actors/<film_id>")
def read_film_actors(film_id):
    actors = get_storage().list_actors_by_film(parse_id(film_id, "film"))
    return actors_schema.dump(actors), 200
