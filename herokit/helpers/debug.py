import functools
import logging

logger = logging.getLogger(__name__.split(".")[-1])


def log_call(fn):
    @functools.wraps(fn)
    def __wrapped(*args, **kwargs):
        logger.debug(f"Calling {fn.__qualname__} {args} {kwargs}")
        result = fn(*args, **kwargs)
        logger.debug(f"{fn.__qualname__} returned {result!r}")
        return result
    return __wrapped
