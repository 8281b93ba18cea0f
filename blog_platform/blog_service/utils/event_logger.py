"""
Activity logger for account and content events.
"""
from datetime import datetime
from typing import Optional
from fastapi import Request
import sys
import logging
import os

from ..config import settings

_FORMATTER = logging.Formatter("%(asctime)s %(levelname)s:%(message)s")

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)
# stdout and file handlers are attached directly, not through root
logger.propagate = False

stdout_handler = logging.StreamHandler(sys.stdout)
stdout_handler.setFormatter(_FORMATTER)
logger.addHandler(stdout_handler)


def _attach_file_handler(log_dir: str) -> None:
    # Try to add file handler, but continue with stdout only if the directory is unusable
    try:
        os.makedirs(log_dir, exist_ok=True)
        handler = logging.FileHandler(os.path.join(log_dir, "blog_activity.log"))
    except (OSError, PermissionError) as e:
        print(f"WARNING: Could not set up file logging: {e}", file=sys.stderr)
        return
    handler.setFormatter(_FORMATTER)
    logger.addHandler(handler)


_attach_file_handler(settings.LOG_DIR)


ALLOWED_EVENT_TYPES = {
    "register",
    "login_success",
    "login_failure",
    "logout",
    "post_created",
    "post_deleted",
    "comment_created",
    "comment_deleted",
}


def client_ip(request: Request) -> Optional[str]:
    """Client address, falling back to the first X-Forwarded-For hop."""
    ip_address = None
    if request.client:
        ip_address = request.client.host

    # Check for X-Forwarded-For header (proxy/load balancer scenarios)
    if not ip_address and request.headers.get("x-forwarded-for"):
        ip_address = request.headers.get("x-forwarded-for").split(",")[0].strip()

    return ip_address


def log_activity(
    event_type: str,
    request: Request,
    user_id: Optional[int] = None,
    metadata: Optional[dict] = None
) -> None:
    """
    Log an account or content event.

    Args:
        event_type: One of: register, login_success, login_failure, logout,
                    post_created, post_deleted, comment_created, comment_deleted
        request: FastAPI Request object
        user_id: Id of the acting user, when known
        metadata: Optional dictionary of additional context

    Raises:
        ValueError: If event_type is invalid
    """
    if event_type not in ALLOWED_EVENT_TYPES:
        raise ValueError(
            f"Invalid event_type '{event_type}'. Must be one of: {', '.join(sorted(ALLOWED_EVENT_TYPES))}"
        )

    extra = " ".join(f"{key}={value}" for key, value in (metadata or {}).items())
    logger.info(
        "ACTIVITY %s user_id=%s ip=%s user_agent=%s timestamp=%s %s",
        event_type,
        user_id,
        client_ip(request),
        request.headers.get("user-agent"),
        datetime.utcnow().isoformat(),
        extra,
    )
