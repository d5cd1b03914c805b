from api.models.actor import Actor
from api.schemas import ma
from marshmallow import fields, validate

class ActorSchema(ma.SQLAlchemyAutoSchema):
    class Meta:
        model = Actor

    # ids go out as strings
    id = fields.String(dump_only=True)
    name = fields.String(required=True, validate=validate.Length(min=1))

    # None clears the column on update; absent fields default on create
    sex = fields.String(allow_none=True, load_default="")
    birthday = fields.String(allow_none=True, load_default="")

# instantiate
actor_schema = ActorSchema()
actors_schema = ActorSchema(many=True)
