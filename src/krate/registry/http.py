"""request building and response handling shared by the sync and async clients."""
import logging
from typing import Dict, Optional, Union
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from ..config import UNIQUE_USER_AGENT
from ..domain.errors import (
    EMPTY_USER_AGENT_MESSAGE,
    KrateConfigError,
    KrateError,
    KrateNotFoundError,
    OtherKrateError,
)
from ..domain.models import Krate

logger = logging.getLogger(__name__)

_FORBIDDEN_HEADER_CHARS = ("\r", "\n", "\0")

# httpx rejects a malformed url before sending, outside its HTTPError tree
FetchError = Union[httpx.HTTPError, httpx.InvalidURL]


def has_empty_user_agent(user_agent: str) -> bool:
    return len(user_agent.strip()) == 0


def build_user_agent(user_agent: str) -> str:
    """
    validate the caller's identification and append the library suffix.

    raises:
        KrateConfigError: if the identification is blank or cannot be a header value
    """
    if has_empty_user_agent(user_agent):
        raise KrateConfigError(EMPTY_USER_AGENT_MESSAGE)
    if any(c in user_agent for c in _FORBIDDEN_HEADER_CHARS):
        raise KrateConfigError("identification must not contain line breaks or NUL characters")

    return f"{user_agent} - Brought to you by: {UNIQUE_USER_AGENT}"


def build_headers(user_agent: str) -> Dict[str, str]:
    return {
        "Accept": "application/json",
        "User-Agent": build_user_agent(user_agent),
    }


def crate_url(base_url: str, crate_name: str) -> str:
    # the name is always exactly one path segment
    return f"{base_url.rstrip('/')}/{quote(crate_name, safe='')}"


def classify_error(error: FetchError, crate_name: Optional[str] = None) -> KrateError:
    """map a failed exchange onto KrateNotFoundError or OtherKrateError."""
    if isinstance(error, httpx.HTTPStatusError):
        status_code = error.response.status_code
        if status_code == httpx.codes.NOT_FOUND:
            logger.debug(f"crate '{crate_name}' not found (404)")
            return KrateNotFoundError(crate_name)
        logger.debug(f"registry answered {status_code} for '{crate_name}'")
        return OtherKrateError(f"registry request failed: {error}", status_code=status_code)

    logger.debug(f"transport error for '{crate_name}': {error!r}")
    return OtherKrateError(f"registry request failed: {error}")


def handle_response(response: httpx.Response, crate_name: Optional[str] = None) -> Krate:
    """classify a non-2xx response or decode the body of a 2xx one."""
    try:
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise classify_error(e, crate_name) from e

    try:
        krate = Krate.from_json(response.content)
    except ValidationError as e:
        logger.debug(f"could not decode response for '{crate_name}': {e}")
        raise OtherKrateError(
            f"could not decode registry response: {e}",
            status_code=response.status_code,
        ) from e

    logger.debug(f"decoded '{krate.name}' with {len(krate.versions)} versions")
    return krate
