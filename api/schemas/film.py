from api.models import MAX_INT
from api.models.film import Film
from api.schemas import ma
from marshmallow import fields, validate

class FilmSchema(ma.SQLAlchemyAutoSchema):
    class Meta:
        model = Film

    id = fields.String(dump_only=True)
    name = fields.String(required=True, validate=validate.Length(min=1))
    description = fields.String(allow_none=True, load_default="")
    rating = fields.Integer(allow_none=True, load_default=0, validate=validate.Range(min=-MAX_INT, max=MAX_INT))
    release = fields.String(allow_none=True, load_default="")


class CreateFilmSchema(FilmSchema):
    # exact actor names, resolved to ids when the film is created
    actors = fields.List(fields.String(), load_only=True, load_default=list)
    actor_ids = fields.List(
        fields.Integer(strict=True, validate=validate.Range(min=1, max=MAX_INT)),
        load_only=True,
        load_default=list,
    )


film_schema = FilmSchema()
films_schema = FilmSchema(many=True)
create_film_schema = CreateFilmSchema()
