"""
scormchat Logging System

Color-coded console logging with topic context for the page bootstrap,
the build tooling and the test server.
"""

import logging
import sys
from typing import Optional, Union
from colorama import Fore, Back, Style, init
from datetime import datetime
from contextvars import ContextVar

# Initialize colorama for cross-platform color support
init(autoreset=True)

# Topic currently being built/tested, if any
CURRENT_TOPIC: ContextVar[Optional[str]] = ContextVar('current_topic', default=None)

COMPONENT_COLORS = {
    'server': Fore.BLUE,
    'widgets': Fore.MAGENTA,
    'runtime': Fore.CYAN,
    'tooling': Fore.YELLOW,
    'default': Fore.GREEN,
}

LEVEL_COLORS = {
    'DEBUG': Fore.WHITE,
    'INFO': Fore.GREEN,
    'WARNING': Fore.YELLOW,
    'ERROR': Fore.RED,
    'CRITICAL': Fore.RED + Back.WHITE
}


def get_component_color(logger_name: str) -> str:
    """Pick a color from the first package segment after 'scormchat'"""
    parts = logger_name.split('.')
    section = parts[1] if len(parts) > 1 and parts[0] == 'scormchat' else parts[0]
    return COMPONENT_COLORS.get(section, COMPONENT_COLORS['default'])


class ScormChatFormatter(logging.Formatter):
    """Formatter with colored level, component and optional topic"""

    def format(self, record):
        topic = CURRENT_TOPIC.get() or getattr(record, 'topic', None)

        timestamp = datetime.fromtimestamp(record.created).strftime('%H:%M:%S.%f')[:-3]

        level_color = LEVEL_COLORS.get(record.levelname, Fore.WHITE)
        colored_level = f"{level_color}{record.levelname:8s}{Style.RESET_ALL}"

        component = record.name.split('.')[-1] if '.' in record.name else record.name
        if len(component) > 12:
            component = component[:12]
        component_color = get_component_color(record.name)

        context_str = f" [topic={topic}]" if topic else ""

        message = record.getMessage()

        log_line = (
            f"{Fore.WHITE}{timestamp}{Style.RESET_ALL} {colored_level} "
            f"{component_color}{component:12s}{Style.RESET_ALL}{context_str} {message}"
        )

        if record.exc_info:
            log_line += '\n' + self.formatException(record.exc_info)

        return log_line


class TopicContextAdapter(logging.LoggerAdapter):
    """Logger adapter that tags every record with the topic being processed"""

    def __init__(self, logger, topic: str):
        super().__init__(logger, {})
        self.topic = topic

    def process(self, msg, kwargs):
        extra = kwargs.get('extra', {})
        extra['topic'] = self.topic
        kwargs['extra'] = extra
        return msg, kwargs


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Setup the scormchat logging system"""

    numeric_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger('scormchat')
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(ScormChatFormatter())
    root_logger.addHandler(console_handler)

    # File handler if specified (without colors)
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s %(levelname)-8s %(name)-28s %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        root_logger.addHandler(file_handler)

    # Disable propagation to avoid duplicate logs
    root_logger.propagate = False

    # Quiet noisy libraries
    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('uvicorn.access').setLevel(logging.WARNING)


def get_logger(name: str, topic: Optional[str] = None) -> Union[logging.Logger, TopicContextAdapter]:
    """Get a logger for a specific component, optionally bound to a topic"""

    logger_name = f"scormchat.{name}" if not name.startswith('scormchat') else name
    logger = logging.getLogger(logger_name)

    if topic:
        return TopicContextAdapter(logger, topic)

    return logger
