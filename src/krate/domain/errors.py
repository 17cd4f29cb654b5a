from typing import Optional

NOT_FOUND_MESSAGE = "crate name is not found, check spelling."
EMPTY_USER_AGENT_MESSAGE = "identification must contain at least one visible character"


class KrateError(Exception):
    """base class for exceptions in krate."""
    pass


class KrateConfigError(KrateError):
    """raised when a client cannot be built from the given identification."""
    pass


class KrateNotFoundError(KrateError):
    """raised when the registry answers 404 for a crate name."""
    def __init__(self, crate_name: Optional[str] = None):
        self.crate_name = crate_name
        super().__init__(NOT_FOUND_MESSAGE)


class OtherKrateError(KrateError):
    """raised for any other transport, status or decode failure."""
    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class EmptyVersionListError(KrateError):
    """raised when a latest version is requested from a crate without versions."""
    def __init__(self, crate_name: str):
        self.crate_name = crate_name
        super().__init__(f"Crate '{crate_name}' has no published versions")
