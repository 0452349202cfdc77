import functools
import importlib
import logging
import pkgutil
from collections.abc import Callable

LOG_FORMAT = '%(asctime)s %(levelname)-8s [%(name)s:%(funcName)s] : %(message)s'


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
    )


def scan(package: str):
    """
    Decorator that imports every module of `package` before the decorated
    function runs, so that registration side effects (decorators) happen.
    """
    def decorator(func: Callable):

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            py_package = importlib.import_module(package)

            for module_info in pkgutil.iter_modules(py_package.__path__):
                module_name = f"{package}.{module_info.name}"
                importlib.import_module(module_name)

            return func(*args, **kwargs)

        return wrapper

    return decorator
