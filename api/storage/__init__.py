import logging
from contextlib import contextmanager

from flask import current_app
from sqlalchemy import delete, insert, select
from sqlalchemy.exc import SQLAlchemyError

from api.errors import ActorNotFound, AmbiguousActor, NotFound, StorageError
from api.models import film_actor
from api.models.actor import Actor
from api.models.film import Film
from api.storage.queries import build_partial_update

logger = logging.getLogger(__name__)


# all SQL runs here; writes are one transaction each, rolled back on any failure
class Storage:
    def __init__(self, db):
        self.db = db

    @property
    def session(self):
        return self.db.session

    @contextmanager
    def _transaction(self, op, commit=True):
        session = self.session
        try:
            yield session
            if commit:
                session.commit()
        except SQLAlchemyError as err:
            session.rollback()
            logger.exception("%s failed: %s", op, err)
            raise StorageError(op) from err
        except Exception:
            session.rollback()
            raise

    # films

    def list_films(self):
        with self._transaction("storage.list_films", commit=False) as session:
            return session.scalars(select(Film).order_by(Film.id)).all()

    def get_film(self, film_id):
        with self._transaction("storage.get_film", commit=False) as session:
            film = session.get(Film, film_id)
            if film is None:
                raise NotFound(f"film {film_id} not found")
            return film

    def create_film(self, data):
        # every name and id is resolved before anything is written
        with self._transaction("storage.create_film") as session:
            actor_ids = self._resolve_actors(
                session, data.get("actors", []), data.get("actor_ids", [])
            )

            film = Film(
                name=data["name"],
                description=data.get("description"),
                rating=data.get("rating"),
                release=data.get("release"),
            )
            session.add(film)
            session.flush()  # assigns film.id
            film_id = film.id

            if actor_ids:
                session.execute(
                    insert(film_actor),
                    [{"film_id": film_id, "actor_id": actor_id} for actor_id in actor_ids],
                )

        logger.info("created film %s with %d actor(s)", film_id, len(actor_ids))
        return film_id

    def update_film(self, film_id, changes):
        stmt = build_partial_update(Film.__table__, film_id, changes, Film.UPDATABLE_FIELDS)
        with self._transaction("storage.update_film") as session:
            if session.execute(stmt).rowcount == 0:
                raise NotFound(f"film {film_id} not found")
        logger.info("updated film %s: %s", film_id, ", ".join(sorted(changes)))

    def delete_film(self, film_id):
        with self._transaction("storage.delete_film") as session:
            session.execute(delete(film_actor).where(film_actor.c.film_id == film_id))
            result = session.execute(delete(Film.__table__).where(Film.__table__.c.id == film_id))
            if result.rowcount == 0:
                raise NotFound(f"film {film_id} not found")
        logger.info("deleted film %s", film_id)

    def list_actors_by_film(self, film_id):
        with self._transaction("storage.list_actors_by_film", commit=False) as session:
            if session.get(Film, film_id) is None:
                raise NotFound(f"film {film_id} not found")
            return session.scalars(
                select(Actor)
                .join(film_actor, Actor.id == film_actor.c.actor_id)
                .where(film_actor.c.film_id == film_id)
                .order_by(Actor.id)
            ).all()

    # actors

    def list_actors(self):
        with self._transaction("storage.list_actors", commit=False) as session:
            return session.scalars(select(Actor).order_by(Actor.id)).all()

    def get_actor(self, actor_id):
        with self._transaction("storage.get_actor", commit=False) as session:
            actor = session.get(Actor, actor_id)
            if actor is None:
                raise NotFound(f"actor {actor_id} not found")
            return actor

    def create_actor(self, data):
        with self._transaction("storage.create_actor") as session:
            actor = Actor(
                name=data["name"],
                sex=data.get("sex"),
                birthday=data.get("birthday"),
            )
            session.add(actor)
            session.flush()
            actor_id = actor.id

        logger.info("created actor %s", actor_id)
        return actor_id

    def update_actor(self, actor_id, changes):
        stmt = build_partial_update(Actor.__table__, actor_id, changes, Actor.UPDATABLE_FIELDS)
        with self._transaction("storage.update_actor") as session:
            if session.execute(stmt).rowcount == 0:
                raise NotFound(f"actor {actor_id} not found")
        logger.info("updated actor %s: %s", actor_id, ", ".join(sorted(changes)))

    def delete_actor(self, actor_id):
        with self._transaction("storage.delete_actor") as session:
            session.execute(delete(film_actor).where(film_actor.c.actor_id == actor_id))
            result = session.execute(delete(Actor.__table__).where(Actor.__table__.c.id == actor_id))
            if result.rowcount == 0:
                raise NotFound(f"actor {actor_id} not found")
        logger.info("deleted actor %s", actor_id)

    def list_films_by_actor(self, actor_id):
        with self._transaction("storage.list_films_by_actor", commit=False) as session:
            if session.get(Actor, actor_id) is None:
                raise NotFound(f"actor {actor_id} not found")
            return session.scalars(
                select(Film)
                .join(film_actor, Film.id == film_actor.c.film_id)
                .where(film_actor.c.actor_id == actor_id)
                .order_by(Film.id)
            ).all()

    # helpers

    def _resolve_actors(self, session, names, ids):
        # ordered and de-duplicated so a repeated actor does not hit the composite key
        resolved = []

        for name in names:
            matches = session.scalars(
                select(Actor.id).where(Actor.name == name).order_by(Actor.id)
            ).all()
            if not matches:
                raise ActorNotFound(name)
            if len(matches) > 1:
                raise AmbiguousActor(name, matches)
            if matches[0] not in resolved:
                resolved.append(matches[0])

        for actor_id in ids:
            if session.get(Actor, actor_id) is None:
                raise ActorNotFound(actor_id)
            if actor_id not in resolved:
                resolved.append(actor_id)

        return resolved


def get_storage():
    return current_app.extensions["storage"]
