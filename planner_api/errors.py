# domain errors raised by services and the auth context
# mapped to http responses by the handlers registered in main.py

from typing import Optional


class PlannerError(Exception):
    """base class for errors the api translates into client responses"""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(PlannerError):
    """record is absent or belongs to another user"""

    status_code = 404

    def __init__(self, resource: str, record_id: Optional[int] = None):
        if record_id is None:
            message = f"{resource} not found"
        else:
            message = f"{resource} not found with ID: {record_id}"
        super().__init__(message)
        self.resource = resource
        self.record_id = record_id


class AuthenticationMissing(PlannerError):
    """no verified identity is bound to the current request"""

    status_code = 401

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)
