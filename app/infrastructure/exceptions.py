"""
Custom exceptions for the Infrastructure layer.
"""


class InfrastructureError(Exception):
    """Base class for exceptions in the infrastructure layer."""
    pass


class RecordNotFoundError(InfrastructureError):
    """Raised when a record with the given identifier does not exist."""

    def __init__(self, entity: str, record_id):
        self.entity = entity
        self.record_id = record_id
        super().__init__(f"{entity} {record_id} not found")
