from api.models import db, film_actor

class Film(db.Model):
    __tablename__ = "films"

    # order matters: partial updates emit SET clauses in this order
    UPDATABLE_FIELDS = ("name", "description", "rating", "release")

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.Text, nullable=False)
    description = db.Column(db.Text)
    rating = db.Column(db.Integer)
    release = db.Column(db.Text)  # free text, e.g. "1999-03-31"

    actors = db.relationship("Actor", secondary=film_actor, back_populates="films")

    def __repr__(self):
        return f"<Film {self.id}:{self.name}>"
