import datetime
import enum
import logging
import sys

# Define the custom log levels
CRITICAL = logging.CRITICAL
ERROR = logging.ERROR
RESULT = 35
WARNING = logging.WARNING   # 30
STATUS = 25
INFO = logging.INFO         # 20
VERBOSE = 19
DEBUG = logging.DEBUG       # 10
NOTSET = logging.NOTSET

DEFAULT_STREAM_LOG_LEVEL = logging.INFO
LOGGER_NAME = "hyprpreflight"

custom_levels = {
    'RESULT': RESULT,
    'STATUS': STATUS,
    'VERBOSE': VERBOSE,
}


class COLORS(enum.Enum):
    red = "\033[0;31m"
    green = "\033[0;32m"
    yellow = "\033[0;33m"
    bred = "\033[1;31m"
    bgreen = "\033[1;32m"
    bblue = "\033[1;34m"
    normal = "\033[0m"


level_to_color_map = {
    ERROR: COLORS.bred,
    CRITICAL: COLORS.bred,
    WARNING: COLORS.yellow,
    RESULT: COLORS.bgreen,
    STATUS: COLORS.bblue,
}


def get_level_color(level):
    return level_to_color_map.get(level, COLORS.normal).value


def log_level_factory(level_name):
    level_num = custom_levels.get(level_name, logging.NOTSET)

    def log_func(self, message, *args, **kwargs):
        if self.isEnabledFor(level_num):
            # Point the record at the caller, not at this wrapper.
            kwargs.setdefault("stacklevel", 2)
            self._log(level_num, message, args, **kwargs)
    return log_func


class PreflightLogger(logging.Logger):
    """Logger with the extra STATUS/RESULT/VERBOSE levels."""


for custom_name, custom_num in custom_levels.items():
    logging.addLevelName(custom_num, custom_name)
    setattr(PreflightLogger, custom_name.lower(), log_level_factory(custom_name))


class ColoredStandardFormatter(logging.Formatter):
    def format(self, record):
        formatted_time = datetime.datetime.now().strftime('%Y-%m-%d %H:%M:%S')
        color = get_level_color(record.levelno)
        return f"{color}{formatted_time}|{record.levelname}: {record.getMessage()}{COLORS.normal.value}"


class ColoredDebugFormatter(logging.Formatter):
    def format(self, record):
        formatted_time = datetime.datetime.now().strftime('%Y-%m-%d %H:%M:%S')
        color = get_level_color(record.levelno)
        return f"{color}{formatted_time}|{record.levelname}:{record.module}:{record.lineno}: " \
               f"{record.getMessage()}{COLORS.normal.value}"


def setup_logging(name=LOGGER_NAME, stream_log_level=DEFAULT_STREAM_LOG_LEVEL):
    if isinstance(stream_log_level, str):
        stream_log_level = logging.getLevelName(stream_log_level.upper())

    _logger = PreflightLogger(name)
    _logger.setLevel(logging.DEBUG)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(ColoredStandardFormatter())
    stream_handler.setLevel(stream_log_level)
    _logger.addHandler(stream_handler)

    return _logger


def apply_logging_options(_logger, args):
    if args is None:
        return
    stream_handlers = [h for h in _logger.handlers if not hasattr(h, 'baseFilename')]

    if getattr(args, "verbose", False):
        for stream_handler in stream_handlers:
            if stream_handler.level > VERBOSE:
                stream_handler.setLevel(VERBOSE)

    if getattr(args, "debug", False):
        for stream_handler in stream_handlers:
            stream_handler.setFormatter(ColoredDebugFormatter())
            if stream_handler.level > DEBUG:
                stream_handler.setLevel(DEBUG)

    if getattr(args, "stream_log_level", None):
        for stream_handler in stream_handlers:
            stream_handler.setLevel(args.stream_log_level.upper())
