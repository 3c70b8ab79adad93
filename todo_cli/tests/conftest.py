import logging

import pytest


@pytest.fixture(autouse=True)
def reset_app_logger():
    # setup_logger binds its handler to the sys.stderr of the test that first
    # called it; drop it so every test logs into its own captured stream.
    yield
    logger = logging.getLogger("todo_app")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
