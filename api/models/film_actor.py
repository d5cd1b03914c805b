# api/models/film_actor.py
from api.models import db

# rows go away with either parent
film_actor = db.Table(
    "film_actors",
    db.Column("film_id", db.Integer, db.ForeignKey("films.id", ondelete="CASCADE"), primary_key=True),
    db.Column("actor_id", db.Integer, db.ForeignKey("actors.id", ondelete="CASCADE"), primary_key=True),
)
