import inspect
import functools
from typing import TypeVar, Callable, Optional
from loguru import logger
from ..exceptions import YTFramesException, ProviderException, ConfigurationException, ValidationException

T = TypeVar('T')

__all__ = [
    "log_exceptions",
    "convert_exceptions",
    "YTFramesException",
    "ProviderException",
    "ConfigurationException",
    "ValidationException",
]


def log_exceptions(
    log_level: str = "ERROR",
    include_traceback: bool = True,
    custom_message: Optional[str] = None
):
    """
    Decorator to log exceptions.

    Args:
        log_level: Log level for exception logging
        include_traceback: Whether to include traceback in log
        custom_message: Custom message to include in log
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs) -> T:
            try:
                return await func(*args, **kwargs)
            except Exception as e:
                message = custom_message or f"Exception in {func.__name__}"
                if include_traceback:
                    logger.opt(exception=True).log(log_level, f"{message}: {e}")
                else:
                    logger.log(log_level, f"{message}: {e}")
                raise

        @functools.wraps(func)
        def sync_wrapper(*args, **kwargs) -> T:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                message = custom_message or f"Exception in {func.__name__}"
                if include_traceback:
                    logger.opt(exception=True).log(log_level, f"{message}: {e}")
                else:
                    logger.log(log_level, f"{message}: {e}")
                raise

        if inspect.iscoroutinefunction(func):
            return async_wrapper
        else:
            return sync_wrapper

    return decorator


def convert_exceptions(exception_map: dict):
    """
    Decorator to convert foreign exceptions into service exceptions.

    Exceptions that already belong to the service hierarchy pass through
    untouched so their type survives the conversion.

    Args:
        exception_map: Dictionary mapping exception types to service exception types
    """
    def _convert(e: Exception):
        if isinstance(e, YTFramesException):
            raise e
        for source_exc, target_exc in exception_map.items():
            if isinstance(e, source_exc):
                raise target_exc(str(e), details={"original_exception": type(e).__name__}) from e
        raise e

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs) -> T:
            try:
                return await func(*args, **kwargs)
            except Exception as e:
                _convert(e)

        @functools.wraps(func)
        def sync_wrapper(*args, **kwargs) -> T:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                _convert(e)

        if inspect.iscoroutinefunction(func):
            return async_wrapper
        else:
            return sync_wrapper

    return decorator
