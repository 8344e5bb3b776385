"""Logging utilities for pathsplitter."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

_installed_handlers: list[logging.Handler] = []


@dataclass
class ProcessingStats:
    """Statistics from an analysis run."""

    paths_examined: int = 0
    paths_separated: int = 0
    shapes_created: int = 0
    ids_assigned: int = 0
    error_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def change_count(self) -> int:
        """Separated paths plus assigned identifiers."""
        return self.paths_separated + self.ids_assigned

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Calling this again replaces the handlers installed by a previous call.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)
    _installed_handlers.append(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("pathsplitter")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class ProcessingLogger:
    """Logger for tracking analysis progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ProcessingStats()

    def log_path_start(self, element_id: str | None) -> None:
        """Log start of path examination."""
        self._logger.debug("Examining path", element=element_id)
        self._stats.paths_examined += 1

    def log_path_separated(
        self,
        element_id: str | None,
        new_ids: list[str],
        duration_ms: float,
    ) -> None:
        """Log a compound path replaced by separate shapes."""
        self._logger.info(
            "Path separated",
            element=element_id,
            shapes=len(new_ids),
            new_ids=new_ids,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.paths_separated += 1
        self._stats.shapes_created += len(new_ids)

    def log_path_skipped(self, element_id: str | None, reason: str) -> None:
        """Log path left unchanged."""
        self._logger.debug("Path skipped", element=element_id, reason=reason)

    def log_path_error(
        self,
        element_id: str | None,
        error: Exception,
        traceback: str | None = None,
    ) -> None:
        """Log path processing error."""
        self._logger.error(
            "Path processing failed",
            element=element_id,
            error=str(error),
            error_type=type(error).__name__,
            traceback=traceback,
        )
        self._stats.error_count += 1
        self._stats.errors.append((element_id or "<unnamed>", str(error)))

    def log_ids_assigned(self, tag_counts: dict[str, int]) -> None:
        """Log identifiers assigned to unlabeled elements, per tag."""
        total = sum(tag_counts.values())
        self._logger.info("Identifiers assigned", total=total, by_tag=tag_counts)
        self._stats.ids_assigned += total

    @property
    def stats(self) -> ProcessingStats:
        """Get current processing statistics."""
        return self._stats
