# catalog/core/exceptions.py


class CatalogError(Exception):
    """
    Base exception for all catalog errors
    """
    pass


class NotFound(CatalogError):
    """
    Raised when a referenced Table, Database, Field or ForeignKey row is missing.
    Usually means the metadata drifted away from the synced schema.
    """

    def __init__(self, entity: str, entity_id):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found")


class ValidationError(CatalogError):
    """
    Raised when a Field write carries a value the model does not accept
    (unknown enum member, immutable or unknown column).
    """

    def __init__(self, field: str, value, reason: str = "invalid value"):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"{field}={value!r}: {reason}")


class DetachedRecordError(CatalogError):
    """
    Raised when a derived attribute is read from a record that is not bound to a session
    """

    def __init__(self, entity: str, entity_id):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} is not attached to a session")


class BackgroundTaskFailure(CatalogError):
    """
    Wraps an exception raised inside a background task. Only ever logged.
    """

    def __init__(self, description: str, cause: BaseException):
        self.description = description
        self.cause = cause
        super().__init__(f"{description} failed: {cause!r}")
