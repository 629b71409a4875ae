"""Admin credential check.

A single shared admin username/password pair from configuration.
"""

import hmac

import structlog

from showroom.infrastructure.config import Settings, settings

logger = structlog.get_logger()


def _matches(given: str | None, expected: str | None) -> bool:
    if not given or not expected:
        return False
    return hmac.compare_digest(given.encode("utf-8"), expected.encode("utf-8"))


def check_credentials(
    username: str | None,
    password: str | None,
    config: Settings | None = None,
) -> bool:
    """Check a login against the configured admin credentials.

    Unset credentials never match.

    Args:
        username: Submitted username.
        password: Submitted password.
        config: Settings to check against; defaults to global settings.

    Returns:
        True if both match.
    """
    config = config or settings
    # Both comparisons always run.
    user_ok = _matches(username, config.admin_user)
    pass_ok = _matches(password, config.admin_pass)
    if not (user_ok and pass_ok):
        logger.warning("Admin login failed", username=username)
        return False
    logger.info("Admin login succeeded", username=username)
    return True
