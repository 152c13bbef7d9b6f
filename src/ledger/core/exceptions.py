"""Application-level exceptions."""


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class NotFoundError(AppError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: object):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}", code="NOT_FOUND")


class DuplicateIdError(AppError):
    """Raised when inserting a record whose id is already taken."""

    def __init__(self, resource: str, identifier: object):
        self.resource = resource
        self.identifier = identifier
        super().__init__(
            f"{resource} with ID {identifier} already exists",
            code="DUPLICATE_ID",
        )


class BorrowError(AppError):
    """Raised when a record already has an exclusive-mutable view outstanding."""

    def __init__(self, resource: str, identifier: object):
        self.resource = resource
        self.identifier = identifier
        super().__init__(
            f"{resource} {identifier} is already being edited",
            code="ALREADY_BORROWED",
        )


class IncompleteCourseError(AppError):
    """Raised when a course is missing details needed for its overview."""

    def __init__(self, message: str):
        super().__init__(message, code="INCOMPLETE_COURSE")
