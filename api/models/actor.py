from api.models import db, film_actor

class Actor(db.Model):
    __tablename__ = "actors"

    UPDATABLE_FIELDS = ("name", "sex", "birthday")

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.Text, nullable=False, index=True) # looked up by exact name
    sex = db.Column(db.Text)
    birthday = db.Column(db.Text)

    films = db.relationship("Film", secondary=film_actor, back_populates="actors")

    def __repr__(self):
        return f"<Actor {self.id}:{self.name}>"
