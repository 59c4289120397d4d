import logging
from rpsbot.common import paths

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level=logging.INFO, log_file=None):
    """Set up the rpsbot logger, optionally also writing to logs/<log_file>."""
    log = logging.getLogger("rpsbot")
    log.setLevel(level)
    log.propagate = False

    for handler in list(log.handlers):
        log.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    log.addHandler(stream_handler)

    if log_file is not None:
        paths.log_paths.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(paths.log_paths / log_file)
        file_handler.setFormatter(formatter)
        log.addHandler(file_handler)

    return log
