from abc import ABC


class UserError(ABC, Exception):
    """Base class for user-related errors.

    All errors that inherit from UserError will have their messages
    displayed to the user. These errors should not contain any
    sensitive information.
    """


class NotFoundError(UserError):
    """Raised when a requested resource is not found."""

    def __init__(self, message: str = "Document not found") -> None:
        super().__init__(message)


class MalformedIdError(UserError):
    """Raised when an identifier does not have the shape of a document id."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Malformed id '{value}'")


class AuthenticationError(UserError):
    """Raised when authentication fails."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message)


class AccessDeniedError(UserError):
    """Raised when a user tries to access a resource they do not have permission for."""


class ValidationError(UserError):
    """Raised when user input fails validation."""

    error_type = "validation_error"


class MissingCredentialsError(ValidationError):
    error_type = "missing_credentials"

    def __init__(self, message: str = "password or username missing") -> None:
        super().__init__(message)


class UsernameTooShortError(ValidationError):
    error_type = "username_too_short"

    def __init__(self, message: str = "username must be 3 characters or more") -> None:
        super().__init__(message)


class PasswordTooShortError(ValidationError):
    error_type = "password_too_short"

    def __init__(self, message: str = "password must be 3 characters or more") -> None:
        super().__init__(message)


class PasswordTooLongError(ValidationError):
    error_type = "password_too_long"

    def __init__(self, message: str = "password must be at most 72 bytes") -> None:
        super().__init__(message)


class UsernameTakenError(ValidationError):
    error_type = "username_taken"

    def __init__(self, message: str = "username must be unique") -> None:
        super().__init__(message)


class MissingRequiredFieldError(ValidationError):
    error_type = "missing_required_field"

    def __init__(self, message: str = "title and url are required") -> None:
        super().__init__(message)


class StoreUnavailableError(Exception):
    """Raised when the database cannot be reached. Reported as a server error."""

    def __init__(self, message: str = "Database is unavailable") -> None:
        super().__init__(message)
