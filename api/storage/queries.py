from sqlalchemy import update

from api.errors import NoFieldsToUpdate


def supplied_fields(changes, fields):
    """Return (field, value) pairs for keys present in `changes`, in `fields` order."""
    return [(field, changes[field]) for field in fields if field in changes]


# key present means supplied: None clears a column, a missing key leaves it alone
def build_partial_update(table, entity_id, changes, fields):
    assignments = supplied_fields(changes, fields)
    if not assignments:
        raise NoFieldsToUpdate()

    return (
        update(table)
        .where(table.c.id == entity_id)
        .values({table.c[field]: value for field, value in assignments})
    )
