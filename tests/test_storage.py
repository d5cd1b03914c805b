import pytest
from sqlalchemy import delete, func, insert, select

from api.errors import ActorNotFound, AmbiguousActor, NoFieldsToUpdate, NotFound, StorageError
from api.models import db, film_actor
from api.models.film import Film


def film_data(name, **fields):
    data = {"name": name, "description": "", "rating": 0, "release": "", "actors": [], "actor_ids": []}
    data.update(fields)
    return data


def actor_data(name, **fields):
    return {"name": name, "sex": "", "birthday": "", **fields}


def count_links(storage):
    return storage.session.scalar(select(func.count()).select_from(film_actor))


def test_create_then_get_film(storage):
    keanu = storage.create_actor(actor_data("Keanu", sex="m"))
    carrie = storage.create_actor(actor_data("Carrie-Anne"))
    storage.create_actor(actor_data("Laurence"))

    film_id = storage.create_film(
        film_data("Matrix", description="red pill", rating=9, release="1999-03-31",
                  actors=["Keanu", "Carrie-Anne"])
    )

    film = storage.get_film(film_id)
    assert (film.name, film.description, film.rating, film.release) == ("Matrix", "red pill", 9, "1999-03-31")
    assert [a.id for a in storage.list_actors_by_film(film_id)] == [keanu, carrie]


def test_create_film_links_by_id(storage):
    keanu = storage.create_actor(actor_data("Keanu"))
    film_id = storage.create_film(film_data("John Wick", actor_ids=[keanu]))

    assert [a.name for a in storage.list_actors_by_film(film_id)] == ["Keanu"]
    assert [f.id for f in storage.list_films_by_actor(keanu)] == [film_id]


def test_create_film_deduplicates_actors(storage):
    keanu = storage.create_actor(actor_data("Keanu"))
    film_id = storage.create_film(film_data("Speed", actors=["Keanu", "Keanu"], actor_ids=[keanu]))

    assert len(storage.list_actors_by_film(film_id)) == 1


def test_unknown_actor_leaves_no_film(storage):
    storage.create_actor(actor_data("Keanu"))

    with pytest.raises(ActorNotFound) as exc:
        storage.create_film(film_data("Matrix", actors=["Keanu", "Nobody"]))

    assert exc.value.actor == "Nobody"
    assert storage.list_films() == []
    assert count_links(storage) == 0


def test_unknown_actor_id_leaves_no_film(storage):
    with pytest.raises(ActorNotFound):
        storage.create_film(film_data("Matrix", actor_ids=[42]))
    assert storage.list_films() == []


def test_ambiguous_actor_name(storage):
    first = storage.create_actor(actor_data("Chris Evans"))
    second = storage.create_actor(actor_data("Chris Evans"))

    with pytest.raises(AmbiguousActor) as exc:
        storage.create_film(film_data("Avengers", actors=["Chris Evans"]))

    assert exc.value.actor_ids == [first, second]
    assert storage.list_films() == []


def test_failed_link_insert_rolls_back_film(storage):
    storage.create_actor(actor_data("Keanu"))
    # drop the association table so the link insert fails after the film insert
    film_actor.drop(db.engine)

    with pytest.raises(StorageError) as exc:
        storage.create_film(film_data("Matrix", actors=["Keanu"]))

    assert exc.value.op == "storage.create_film"
    assert storage.list_films() == []


def test_update_changes_only_supplied_fields(storage):
    film_id = storage.create_film(film_data("Matrix", description="d", rating=8, release="1999"))

    storage.update_film(film_id, {"name": "X"})

    film = storage.get_film(film_id)
    assert (film.name, film.description, film.rating, film.release) == ("X", "d", 8, "1999")


def test_update_with_none_clears_field(storage):
    actor_id = storage.create_actor(actor_data("Keanu", sex="m", birthday="1964-09-02"))

    storage.update_actor(actor_id, {"birthday": None})

    actor = storage.get_actor(actor_id)
    assert actor.birthday is None
    assert actor.sex == "m"


def test_update_with_no_fields(storage):
    film_id = storage.create_film(film_data("Matrix"))
    with pytest.raises(NoFieldsToUpdate):
        storage.update_film(film_id, {})


def test_update_missing_rows(storage):
    with pytest.raises(NotFound):
        storage.update_film(404, {"name": "X"})
    with pytest.raises(NotFound):
        storage.update_actor(404, {"name": "X"})


def test_delete_film_removes_links(storage):
    keanu = storage.create_actor(actor_data("Keanu"))
    film_id = storage.create_film(film_data("Matrix", actors=["Keanu"]))
    other_id = storage.create_film(film_data("Speed", actors=["Keanu"]))
    assert count_links(storage) == 2

    storage.delete_film(film_id)

    assert count_links(storage) == 1
    assert [f.id for f in storage.list_films_by_actor(keanu)] == [other_id]
    with pytest.raises(NotFound):
        storage.get_film(film_id)


def test_delete_actor_removes_links(storage):
    keanu = storage.create_actor(actor_data("Keanu"))
    film_id = storage.create_film(film_data("Matrix", actors=["Keanu"]))

    storage.delete_actor(keanu)

    assert count_links(storage) == 0
    assert storage.list_actors_by_film(film_id) == []


def test_delete_missing_rows(storage):
    with pytest.raises(NotFound):
        storage.delete_film(1)
    with pytest.raises(NotFound):
        storage.delete_actor(1)


def test_get_missing_rows(storage):
    with pytest.raises(NotFound):
        storage.get_film(1)
    with pytest.raises(NotFound):
        storage.get_actor(1)
    with pytest.raises(NotFound):
        storage.list_actors_by_film(1)


def test_lists_are_ordered_by_id(storage):
    ids = [storage.create_film(film_data(name)) for name in ("b", "a", "c")]
    assert [f.id for f in storage.list_films()] == ids
    assert isinstance(storage.list_films()[0], Film)


def test_database_failure_is_wrapped(storage):
    db.drop_all()

    with pytest.raises(StorageError) as exc:
        storage.list_actors()

    assert exc.value.op == "storage.list_actors"
    assert exc.value.status_code == 500


@pytest.mark.parametrize("missing", ["film", "actor"])
def test_link_to_missing_parent_is_rejected(storage, missing):
    film_id = storage.create_film(film_data("Matrix"))
    actor_id = storage.create_actor(actor_data("Keanu"))
    row = {"film_id": film_id, "actor_id": actor_id}
    row[f"{missing}_id"] = 77

    with pytest.raises(StorageError):
        with storage._transaction("storage.link") as session:
            session.execute(insert(film_actor), row)

    assert count_links(storage) == 0


def test_deleting_film_row_cascades_to_links(storage):
    storage.create_actor(actor_data("Keanu"))
    film_id = storage.create_film(film_data("Matrix", actors=["Keanu"]))
    assert count_links(storage) == 1

    # bypass Storage.delete_film so only the FK cascade can clean up
    with storage._transaction("storage.raw_delete") as session:
        session.execute(delete(Film.__table__).where(Film.__table__.c.id == film_id))

    assert count_links(storage) == 0
