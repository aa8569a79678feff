import logging, json, sys, time, os

LOG_SOURCE = "daraza-payments"
LOGGER_PREFIX = "daraza"

# Level/file applied by configure_logging(); loggers created afterwards pick them up
_settings = {"level": None, "to_file": None}


class _SourceFilter(logging.Filter):
    """Tags every record with the log source unless the caller set one."""

    def filter(self, record):
        if not hasattr(record, "source"):
            record.source = LOG_SOURCE
        return True


def resolve_level(level, default=logging.INFO):
    """Accepts an int or a level name; unknown names fall back to default."""
    if isinstance(level, int):
        return level
    if isinstance(level, str) and level.strip():
        resolved = logging.getLevelName(level.strip().upper())
        if isinstance(resolved, int):
            return resolved
    return default


def _formatter():
    formatter = logging.Formatter(
        fmt=json.dumps({
            "ts": "%(asctime)s",
            "level": "%(levelname)s",
            "name": "%(name)s",
            "source": "%(source)s",
            "msg": "%(message)s"
        }),
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )
    formatter.converter = time.gmtime  # Use UTC timestamps
    return formatter


def _add_file_handler(logger, to_file):
    path = os.path.abspath(to_file)
    for h in logger.handlers:
        if isinstance(h, logging.FileHandler) and h.baseFilename == path:
            return
    # Ensure the directory exists before writing
    os.makedirs(os.path.dirname(path), exist_ok=True)
    file_handler = logging.FileHandler(path)
    file_handler.setFormatter(_formatter())
    file_handler.addFilter(_SourceFilter())
    logger.addHandler(file_handler)


def get_logger(name="daraza", level=None, to_file=None):
    """Unified structured logger for all Daraza components."""
    logger = logging.getLogger(name)
    if level is None:
        level = _settings["level"] or os.getenv("DARAZA_LOG_LEVEL")
    logger.setLevel(resolve_level(level))

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(_formatter())
        handler.addFilter(_SourceFilter())
        logger.addHandler(handler)

    to_file = to_file or _settings["to_file"] or os.getenv("DARAZA_LOG_FILE")
    if to_file:
        _add_file_handler(logger, to_file)

    return logger


def configure_logging(config):
    """
    Apply a DarazaConfig's log_level/log_file to every Daraza logger that
    already exists and to those created later.
    """
    _settings["level"] = resolve_level(config.log_level)
    _settings["to_file"] = config.log_file or None

    for name, existing in list(logging.root.manager.loggerDict.items()):
        if not isinstance(existing, logging.Logger):
            continue
        if name == LOGGER_PREFIX or name.startswith(LOGGER_PREFIX + "."):
            get_logger(name)
