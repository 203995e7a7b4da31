import logging
import logging.handlers
import os
import sys

from config import (
    APP_LOG_FILE_PATH,
    DEBUG_LOGS_ENABLED,
    LOG_DIR,
    LOG_FILE_BACKUP_COUNT,
    LOG_FILE_MAX_BYTES,
)

from .context import RequestIdFilter

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(req_id)s] %(name)s - %(message)s"
SERVER_LOGGER_NAME = "ChatRelayServer"


def setup_server_logging(log_level_name: str = "INFO", log_to_file: bool = True) -> logging.Logger:
    """
    Configure root logging for the relay server.

    Console output goes to stderr; when ``log_to_file`` is set a rotating file
    handler writes to ``logs/app.log``. Returns the server logger.
    """
    if DEBUG_LOGS_ENABLED:
        log_level_name = "DEBUG"
    log_level = getattr(logging, log_level_name.upper(), logging.INFO)

    formatter = logging.Formatter(LOG_FORMAT)
    request_filter = RequestIdFilter()

    root_logger = logging.getLogger()
    # Drop handlers left over from a previous setup (uvicorn reload, tests)
    for handler in list(root_logger.handlers):
        if getattr(handler, "_chat_relay_handler", False):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(log_level)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(request_filter)
    console_handler._chat_relay_handler = True
    root_logger.addHandler(console_handler)

    if log_to_file:
        os.makedirs(LOG_DIR, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            APP_LOG_FILE_PATH,
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        file_handler.addFilter(request_filter)
        file_handler._chat_relay_handler = True
        root_logger.addHandler(file_handler)

    logging.getLogger("asyncio").setLevel(logging.ERROR)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    logger = logging.getLogger(SERVER_LOGGER_NAME)
    logger.info(
        f"Logging configured (level={logging.getLevelName(log_level)}, file={'on' if log_to_file else 'off'})"
    )
    return logger
