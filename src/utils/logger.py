import sys
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, List, Optional, TextIO
from models.enums import LogLevel, LogCategory


# === ANSI COLORS ===
class Colors:
    """ANSI escape codes for colored terminal output"""
    RESET = '\033[0m'
    DIM = '\033[2m'

    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    CYAN = '\033[36m'
    WHITE = '\033[37m'

    BRIGHT_BLUE = '\033[94m'
    BRIGHT_GREEN = '\033[92m'
    BRIGHT_YELLOW = '\033[93m'
    BRIGHT_MAGENTA = '\033[95m'
    BRIGHT_WHITE = '\033[97m'


CATEGORY_COLORS = {
    LogCategory.CONFIG: Colors.CYAN,
    LogCategory.MOTION: Colors.BRIGHT_MAGENTA,
    LogCategory.ANIMATION: Colors.BRIGHT_YELLOW,
    LogCategory.PRESET: Colors.BRIGHT_GREEN,
    LogCategory.SAMPLER: Colors.BRIGHT_BLUE,
    LogCategory.SYSTEM: Colors.BRIGHT_WHITE,
}

# symbol, color, priority
LEVEL_STYLES = {
    LogLevel.DEBUG: ('·', Colors.DIM, 0),
    LogLevel.INFO: ('✓', Colors.GREEN, 1),
    LogLevel.WARN: ('⚠', Colors.YELLOW, 2),
    LogLevel.ERROR: ('✗', Colors.RED, 3),
}

CATEGORY_WIDTH = 9
DETAIL_INDENT = " " * 11


@dataclass
class LogRecord:
    """One emitted message, as handed to sinks"""
    timestamp: datetime
    level: LogLevel
    category: LogCategory
    message: str
    details: List[str] = field(default_factory=list)


LogSink = Callable[[LogRecord], None]


# === CORE LOGGER ===
class Logger:
    """
    Structured logger with compact output format

    Format:
    [HH:MM:SS] CATEGORY · Message
               ├─ Detail 1
               └─ Detail 2

    Example:
    [14:23:45] PRESET    ✓ Presets loaded
               └─ count: 6

    Besides the terminal, every record that passes the level filter is handed
    to registered sinks (see add_sink), e.g. a list collecting records for
    a render host.
    """

    def __init__(
        self,
        min_level: LogLevel = LogLevel.INFO,
        use_colors: bool = True,
        stream: Optional[TextIO] = None,
    ):
        """
        Initialize logger

        Args:
            min_level: Minimum log level to display
            use_colors: Enable ANSI color codes (disable for file output)
            stream: Output stream (None = current sys.stdout at write time)
        """
        self.min_level = min_level
        self.use_colors = use_colors
        self.stream = stream
        self._sinks: List[LogSink] = []

    def _should_log(self, level: LogLevel) -> bool:
        return LEVEL_STYLES[level][2] >= LEVEL_STYLES[self.min_level][2]

    def _colorize(self, text: str, color: str) -> str:
        if not self.use_colors:
            return text
        return f"{color}{text}{Colors.RESET}"

    def add_sink(self, sink: LogSink) -> None:
        """Register a callable receiving every LogRecord that passes the level filter"""
        self._sinks.append(sink)

    def remove_sink(self, sink: LogSink) -> None:
        if sink in self._sinks:
            self._sinks.remove(sink)

    def format(self, record: LogRecord) -> List[str]:
        """Render a record as terminal lines (header + details tree)"""
        symbol, level_color, _ = LEVEL_STYLES[record.level]
        category = self._colorize(
            record.category.name.ljust(CATEGORY_WIDTH),
            CATEGORY_COLORS.get(record.category, Colors.WHITE),
        )
        lines = [
            f"{record.timestamp.strftime('[%H:%M:%S]')} {category} "
            f"{self._colorize(symbol, level_color)} {self._colorize(record.message, level_color)}"
        ]

        last = len(record.details) - 1
        for i, detail in enumerate(record.details):
            tree = "└─" if i == last else "├─"
            lines.append(f"{DETAIL_INDENT}{self._colorize(tree, Colors.DIM)} {detail}")
        return lines

    def log(
        self,
        category: LogCategory,
        message: str,
        level: LogLevel = LogLevel.INFO,
        details: Optional[list] = None,
        **kwargs
    ):
        """
        Log a structured message

        Args:
            category: Log category (CONFIG, PRESET, etc.)
            message: Main message text
            level: Log level (DEBUG, INFO, WARN, ERROR)
            details: List of detail strings to show below message
            **kwargs: Additional key-value pairs to show as details

        Example:
            logger.log(
                LogCategory.PRESET,
                "Loaded preset",
                name="hero_title.opacity",
                points=2
            )

            Output:
            [14:23:45] PRESET    ✓ Loaded preset
                       ├─ name: hero_title.opacity
                       └─ points: 2
        """
        if not self._should_log(level):
            return

        record = LogRecord(
            timestamp=datetime.now(),
            level=level,
            category=category,
            message=message,
            details=list(details or []) + [f"{k}: {v}" for k, v in kwargs.items()],
        )

        out = self.stream or sys.stdout
        for line in self.format(record):
            print(line, file=out)

        for sink in self._sinks:
            sink(record)

    # === Level helpers ===
    def debug(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.DEBUG, **kw)
    def info(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.INFO, **kw)
    def warn(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.WARN, **kw)
    def error(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.ERROR, **kw)

    # === Contextual logger creation ===
    def for_category(self, category: LogCategory) -> 'BoundLogger':
        """Return a contextual logger bound to a specific category."""
        return BoundLogger(self, category)


class BoundLogger:
    """Logger bound to a default category, with ability to override if needed."""

    def __init__(self, base: Logger, category: LogCategory):
        self._base = base
        self._category = category

    def log(self, message: str, level: LogLevel = LogLevel.INFO, category: Optional[LogCategory] = None, **kw):
        self._base.log(category or self._category, message, level, **kw)

    def debug(self, message: str, **kw): self.log(message, LogLevel.DEBUG, **kw)
    def info(self, message: str, **kw): self.log(message, LogLevel.INFO, **kw)
    def warn(self, message: str, **kw): self.log(message, LogLevel.WARN, **kw)
    def error(self, message: str, **kw): self.log(message, LogLevel.ERROR, **kw)

    def is_enabled(self, level: LogLevel) -> bool:
        """True if a message at this level would be emitted (skip building expensive details otherwise)"""
        return self._base._should_log(level)

    def with_category(self, category: LogCategory) -> 'BoundLogger':
        """Create another bound logger from this one."""
        return BoundLogger(self._base, category)


# === Global instance helpers ===
_logger = Logger()

def get_logger() -> Logger:
    return _logger

def get_category_logger(category: LogCategory) -> BoundLogger:
    """Returns a logger bound to a specific category"""
    return _logger.for_category(category)

def configure_logger(
    min_level: LogLevel = LogLevel.INFO,
    use_colors: bool = True,
    stream: Optional[TextIO] = None,
):
    """
    Configure the logger singleton in place.

    Bound loggers created at import time keep pointing at the same instance.
    Registered sinks are kept.
    """
    _logger.min_level = min_level
    _logger.use_colors = use_colors
    _logger.stream = stream
