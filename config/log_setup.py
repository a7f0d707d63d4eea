"""
Logging setup for the Streamlit app and the mock service.
"""

import logging

from config.settings import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
HANDLER_NAME = "shopster"


def configure_logging(level: str | None = None) -> None:
    """
    Configure the root logger once.

    Streamlit re-runs the script on every interaction, so repeated calls
    must not stack handlers.
    """
    level_name = (level or get_settings().log_level).upper()
    root = logging.getLogger()
    root.setLevel(level_name)

    if not any(h.get_name() == HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.set_name(HANDLER_NAME)
        root.addHandler(handler)
