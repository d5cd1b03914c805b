import logging

logger = logging.getLogger(__name__)


# each error knows the status it renders as
class ApiError(Exception):
    status_code = 500

    def __init__(self, message=None):
        super().__init__(message)
        self.message = message or self.__class__.__name__

    def to_dict(self):
        return {"error": self.message}


class BadRequest(ApiError):
    status_code = 400


class NoFieldsToUpdate(BadRequest):
    def __init__(self, message="no fields to update"):
        super().__init__(message)


class NotFound(ApiError):
    status_code = 404


class ActorNotFound(ApiError):
    # the request is well formed, it just references an actor that is not there
    status_code = 409

    def __init__(self, actor):
        super().__init__(f"actor not found: {actor}")
        self.actor = actor


class AmbiguousActor(ApiError):
    status_code = 409

    def __init__(self, name, actor_ids):
        super().__init__(
            f"actor name is ambiguous: {name} matches ids {', '.join(str(i) for i in actor_ids)}"
        )
        self.name = name
        self.actor_ids = list(actor_ids)


class StorageError(ApiError):
    """Any database failure. Only the operation tag reaches the client."""

    status_code = 500

    def __init__(self, op):
        super().__init__(f"{op}: internal storage error")
        self.op = op


def handle_api_error(err):
    if err.status_code >= 500:
        logger.error("request failed: %s", err.message)
    return err.to_dict(), err.status_code
