"""Domain layer errors.

The set of errors is closed: the API boundary matches on these types to
choose a response, so every variant carries its data as attributes.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Caller-fixable input error with field-level details."""

    def __init__(
        self, field: str, message: str, details: dict[str, str] | None = None
    ):
        self.field = field
        self.message = message
        self.details = details if details is not None else {field: message}
        super().__init__(f"{field}: {message}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class DuplicateVoteError(DomainError):
    """Raised when the vote uniqueness constraint itself is violated.

    Normal submissions turn an existing vote into an update; this only
    surfaces when the storage layer loses a race it cannot reconcile.
    """

    def __init__(
        self, comment_id: str, personality_system: str, voter_identifier: str
    ):
        self.comment_id = comment_id
        self.personality_system = personality_system
        self.voter_identifier = voter_identifier
        super().__init__(
            f"Conflicting {personality_system} vote on comment {comment_id}"
        )


class DuplicateProfileError(DomainError):
    """Raised when creating a profile whose ID is already taken."""

    def __init__(self, profile_id: int):
        self.profile_id = profile_id
        super().__init__(f"Profile with ID {profile_id} already exists")


class VoteTallyError(Exception):
    """A vote was written but its tally delta could not be applied.

    Not a DomainError: it surfaces as a generic server error and the
    request rolls back.
    """

    def __init__(self, comment_id: str, personality_system: str):
        self.comment_id = comment_id
        self.personality_system = personality_system
        super().__init__(
            f"Failed to update {personality_system} tally for comment {comment_id}"
        )
