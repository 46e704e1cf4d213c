"""Exception types for the proposal engine and its service layer."""


class ProposalEngineError(RuntimeError):
    """Raised for programming errors inside the engine (never for bad intake data)."""
    pass


class UnsupportedCategoryError(ProposalEngineError):
    """Raised when a service category has no content builder registered."""
    pass


class UnknownTemplateError(ProposalEngineError):
    """Raised when a selected template has no template builder registered."""
    pass


class CustomerNotFoundError(LookupError):
    """Raised when the customer store has no record for an id."""
    pass


class ProposalPersistenceError(RuntimeError):
    """Raised when the customer store rejects a proposal update."""
    pass
