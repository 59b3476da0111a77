"""Domain layer errors.

Every error carries a stable ``code`` that callers map to a response.
Validation errors are raised before any ledger write happens.
"""


class DomainError(Exception):
    """Base domain error."""

    code = "domain_error"


class NotFoundError(DomainError):
    """Raised when a target, post or poll is absent or hidden."""

    code = "not_found"

    def __init__(self, resource: str, identifier: object):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InvalidArgumentError(DomainError):
    """Raised for a malformed enum value or an invalid definition."""

    code = "invalid_argument"


class PollEndedError(DomainError):
    """Raised when voting on a poll past its deadline."""

    code = "poll_ended"

    def __init__(self, poll_id: object):
        self.poll_id = poll_id
        super().__init__("This poll has ended")


class InvalidOptionError(DomainError):
    """Raised when a selected option does not belong to the poll."""

    code = "invalid_option"

    def __init__(self, option_id: object):
        self.option_id = option_id
        super().__init__(f"Invalid poll option: {option_id}")


class MultipleNotAllowedError(DomainError):
    """Raised when a single-select poll receives more than one option."""

    code = "multiple_not_allowed"

    def __init__(self) -> None:
        super().__init__("This poll only allows one selection")


class TooManyChoicesError(DomainError):
    """Raised when a multi-select poll receives more than max_choices options."""

    code = "too_many_choices"

    def __init__(self, max_choices: int, requested: int):
        self.max_choices = max_choices
        self.requested = requested
        super().__init__(
            f"Too many options selected: {requested} (maximum {max_choices})"
        )


class ConflictError(DomainError):
    """Raised when a concurrent write violated a ledger uniqueness constraint.

    The consistency boundary retries the operation; callers never see it.
    """

    code = "conflict"


class InternalError(DomainError):
    """Raised for an unexpected storage failure."""

    code = "internal"
