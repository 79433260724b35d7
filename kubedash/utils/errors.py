"""
Classification of errors raised while assembling a resource view.

A critical error aborts the whole request. A non-critical one only degrades
the result: it is logged, collected and shown to the user as a warning.
"""

import logging
from http import HTTPStatus
from typing import List, Optional, Tuple

from kubernetes.client.exceptions import ApiException

from kubedash.utils.logger import get_logger

logger = get_logger(__name__)

NON_CRITICAL_STATUSES = frozenset({HTTPStatus.FORBIDDEN})


def is_error_critical(err: Exception) -> bool:
    if not isinstance(err, ApiException):
        return True
    return err.status not in NON_CRITICAL_STATUSES


def handle_error(
    err: Optional[Exception], log: Optional[logging.Logger] = None
) -> Tuple[List[Exception], Optional[Exception]]:
    """
    Split an error into non-critical errors and a critical one.

    Returns ``([], None)`` for no error, ``([], err)`` when ``err`` must abort
    the request and ``([err], None)`` when the request may continue.
    """
    return append_error(err, [], log)


def append_error(
    err: Optional[Exception],
    non_critical_errors: List[Exception],
    log: Optional[logging.Logger] = None,
) -> Tuple[List[Exception], Optional[Exception]]:
    log = log or logger
    if err is None:
        return non_critical_errors, None
    if is_error_critical(err):
        return non_critical_errors, err

    log.warning("Non-critical error occurred during resource retrieval: %s", err)
    if err not in non_critical_errors:
        non_critical_errors = non_critical_errors + [err]
    return non_critical_errors, None
