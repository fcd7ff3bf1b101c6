import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)


def attempt(description: str, func: Callable, *args, **kwargs) -> bool:
    """
    Run a non-critical sub-operation.

    Failures are logged as warnings and reported through the return value,
    never raised to the caller.
    """
    try:
        func(*args, **kwargs)
        return True
    except Exception as e:
        logger.warning(f'Non-critical: {description} failed: {e}')
        return False
