# booklist/core/logging_config.py

import logging
from typing import Optional

from booklist.core.config.settings import settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Configures root logging once for the application and returns the app logger.
    """
    logging.basicConfig(level=(level or settings.LOG_LEVEL).upper(), format=LOG_FORMAT)
    return logging.getLogger(settings.APP_NAME)
