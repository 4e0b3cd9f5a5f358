"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class ImageTooLargeError(ValidationError):
    """Raised when an uploaded image exceeds the size limit."""

    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(
            f"Image is {size} bytes; the maximum allowed is {limit} bytes"
        )


class InvalidImageError(ValidationError):
    """Raised when an image reference is neither a URL nor an image data URL."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when an actor attempts an action they are not allowed to take."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InvalidCredentialsError(DomainError):
    """Raised when a contact/password pair does not match an account."""

    def __init__(self):
        super().__init__("Invalid credentials")


class AccountDeactivatedError(DomainError):
    """Raised when a deactivated account tries to sign in."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__("This account has been deactivated")
