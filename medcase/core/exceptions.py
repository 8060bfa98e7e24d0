"""
Domain error types.

Every error carries the HTTP status it maps to; ``main.py`` registers a single
handler that turns them into JSON responses.
"""
from typing import Optional, Dict


class MedcaseError(Exception):
    status_code: int = 400
    detail: str = "Bad request"

    def __init__(self, detail: Optional[str] = None, headers: Optional[Dict[str, str]] = None):
        self.detail = detail or self.detail
        self.headers = headers
        super().__init__(self.detail)


class Unauthenticated(MedcaseError):
    """Raised when a request carries no session or an invalid one."""
    status_code = 401
    detail = "Could not validate credentials"

    def __init__(self, detail: Optional[str] = None):
        super().__init__(detail, headers={"WWW-Authenticate": "Bearer"})


class InvalidCredentials(Unauthenticated):
    """Same error for an unknown email and a wrong password."""
    detail = "Incorrect email or password"


class PermissionDenied(MedcaseError):
    status_code = 403
    detail = "Not enough permissions"


class NotFoundOrForbidden(MedcaseError):
    """Resource is absent or the caller may not see it; the two are not distinguished."""
    status_code = 404
    detail = "Not found or access denied"


class DuplicateEmail(MedcaseError):
    detail = "User already exists"


class DuplicateName(MedcaseError):
    detail = "An entry with this name already exists"


class PayloadTooLarge(MedcaseError):
    detail = "File size exceeds 5MB limit"


class UnsupportedMediaType(MedcaseError):
    detail = "File type not allowed"


class InvalidReference(MedcaseError):
    """A referenced record (case type, client, employee) does not exist."""
    detail = "Referenced record does not exist"
