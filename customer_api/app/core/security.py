"""
Security helpers for HTTP Basic authentication.

Every customer route depends on :func:`get_current_user`.  The
expected username and password come from the ``Settings`` instance the
application was created with (``app.state.settings``), so tests and
alternative deployments can supply their own credentials without
touching environment variables.  Credentials are compared in constant
time.
"""

import hmac
import logging
from typing import Dict

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

logger = logging.getLogger(__name__)

security = HTTPBasic(auto_error=False)


def _matches(supplied: str, expected: str) -> bool:
    """Constant‑time string comparison."""
    return hmac.compare_digest(supplied.encode("utf-8"), expected.encode("utf-8"))


def get_current_user(
    request: Request,
    credentials: HTTPBasicCredentials = Depends(security),
) -> Dict[str, str]:
    """Dependency that authenticates the request with HTTP Basic.

    Raises HTTP 401 with a ``WWW-Authenticate: Basic`` header when the
    ``Authorization`` header is missing or the credentials do not match.
    On success returns a small user context with the username under
    ``sub``.
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Basic"},
        )
    settings = request.app.state.settings
    # Evaluate both comparisons so timing does not reveal which one failed.
    username_ok = _matches(credentials.username, settings.api_username)
    password_ok = _matches(credentials.password, settings.api_password)
    if not (username_ok and password_ok):
        logger.warning("Rejected credentials for user %r", credentials.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
            headers={"WWW-Authenticate": "Basic"},
        )
    return {"sub": credentials.username}
