"""Structured logger for observability."""

import logging
from typing import Any, Optional

_logger = logging.getLogger("mobil_marketplace")
_logger.setLevel(logging.INFO)

if not _logger.handlers:
    handler = logging.StreamHandler()
    handler.setLevel(logging.INFO)
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    _logger.addHandler(handler)


def log_request(
    request_id: str,
    component: str,
    level: int = logging.INFO,
    **kwargs: Any,
) -> None:
    """
    Log structured event for an HTTP request.

    Args:
        request_id: Request identifier (UUID string)
        component: Component name (e.g., 'http', 'listing', 'auth')
        level: Log level (default: INFO)
        **kwargs: Additional structured fields to log
    """
    fields = {
        "request_id": request_id,
        "component": component,
    }
    fields.update(kwargs)

    # Format as key=value pairs for readability
    log_parts = [f"{k}={v!r}" for k, v in fields.items()]
    _logger.log(level, " | ".join(log_parts))


def log_registration(
    request_id: str,
    role: str,
    user_id: Optional[str] = None,
    rejected_reason: Optional[str] = None,
) -> None:
    """
    Log registration outcome.

    Args:
        request_id: Request identifier
        role: Requested role
        user_id: Created user id, when registration succeeded
        rejected_reason: Validation message, when registration was rejected
    """
    fields: dict[str, Any] = {"role": role}
    if user_id is not None:
        fields["user_id"] = user_id
    if rejected_reason is not None:
        fields["rejected_reason"] = rejected_reason

    log_request(request_id=request_id, component="registration", **fields)


def log_listing_created(
    request_id: str,
    car_id: str,
    user_id: str,
    **kwargs: Any,
) -> None:
    """
    Log listing creation.

    Args:
        request_id: Request identifier
        car_id: Created car id
        user_id: Owner id
        **kwargs: Additional fields
    """
    log_request(
        request_id=request_id,
        component="listing",
        car_id=car_id,
        user_id=user_id,
        **kwargs,
    )


def log_listing_search(
    request_id: str,
    filters: dict[str, Any],
    results_count: int,
) -> None:
    """
    Log listing search event.

    Args:
        request_id: Request identifier
        filters: Active filters
        results_count: Number of results
    """
    log_request(
        request_id=request_id,
        component="search",
        search_filters=filters,
        search_results_count=results_count,
    )


def log_listing_viewed(request_id: str, car_id: str, views_before: int) -> None:
    """Log a detail fetch that incremented the view counter."""
    log_request(
        request_id=request_id,
        component="detail",
        car_id=car_id,
        views_before=views_before,
    )


# Export logger instance for direct use
logger = _logger
