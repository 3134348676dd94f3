"""Logging configuration for Naviksha.

This module provides structured logging with different handlers for
development, test and production environments, including JSON formatting
for log aggregation in production.
"""

import logging
import logging.handlers
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from pythonjsonlogger import jsonlogger


class NavikshaFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter for Naviksha application logs."""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        """Add custom fields to log record.

        Args:
            log_record: The log record dictionary to modify
            record: The original logging record
            message_dict: Additional message data
        """
        super().add_fields(log_record, record, message_dict)

        log_record['timestamp'] = datetime.utcnow().isoformat() + 'Z'
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['module'] = record.module
        log_record['function'] = record.funcName
        log_record['line'] = record.lineno

        log_record['application'] = 'naviksha'
        log_record['service'] = 'career-match-engine'

        if record.exc_info:
            log_record['exception'] = self.formatException(record.exc_info)


class ContextFilter(logging.Filter):
    """Filter to add contextual information to log records."""

    def __init__(self, context: Optional[Dict[str, Any]] = None):
        """Initialize context filter.

        Args:
            context: Additional context to add to all log records
        """
        super().__init__()
        self.context = context or {}

    def filter(self, record: logging.LogRecord) -> bool:
        """Add context to log record.

        Args:
            record: The log record to modify

        Returns:
            bool: Always True to allow all records
        """
        for key, value in self.context.items():
            setattr(record, key, value)

        return True


class LoggerConfig:
    """Logger configuration manager."""

    # Component loggers
    COMPONENTS = {
        'scoring': 'naviksha.scoring',
        'ranking': 'naviksha.ranking',
        'report': 'naviksha.report',
        'catalog': 'naviksha.catalog',
    }

    def __init__(
        self,
        environment: str = 'development',
        log_level: str = 'INFO',
        log_dir: Optional[str] = None
    ):
        """Initialize logger configuration.

        Args:
            environment: Environment name (development, test, staging, production)
            log_level: Default log level
            log_dir: Directory for rotating log files; None keeps logs on the console
        """
        self.environment = environment
        self.log_level = getattr(logging, log_level.upper())
        self.log_dir = Path(log_dir) if log_dir else None

        self._configure_root_logger()
        self._configure_component_loggers()

    def _configure_root_logger(self) -> None:
        """Configure the root logger."""
        root_logger = logging.getLogger()
        root_logger.setLevel(self.log_level)

        root_logger.handlers.clear()

        if self.environment in ('production', 'staging'):
            self._add_production_handlers(root_logger)
        elif self.environment == 'test':
            self._add_test_handlers(root_logger)
        else:
            self._add_development_handlers(root_logger)

    def _add_production_handlers(self, logger: logging.Logger) -> None:
        """Add production-grade handlers.

        Args:
            logger: Logger to configure
        """
        json_formatter = NavikshaFormatter(
            fmt='%(timestamp)s %(level)s %(logger)s %(message)s'
        )

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(json_formatter)
        logger.addHandler(console_handler)

        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            app_handler = logging.handlers.RotatingFileHandler(
                filename=self.log_dir / "application.log",
                maxBytes=50 * 1024 * 1024,  # 50MB
                backupCount=10,
                encoding='utf-8'
            )
            app_handler.setLevel(logging.INFO)
            app_handler.setFormatter(json_formatter)
            logger.addHandler(app_handler)

    def _add_development_handlers(self, logger: logging.Logger) -> None:
        """Add development-friendly handlers.

        Args:
            logger: Logger to configure
        """
        dev_formatter = logging.Formatter(
            fmt='%(asctime)s | %(levelname)-8s | %(name)-20s | %(funcName)-15s:%(lineno)-3d | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(dev_formatter)
        logger.addHandler(console_handler)

        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            debug_handler = logging.FileHandler(
                filename=self.log_dir / "debug.log",
                mode='a',
                encoding='utf-8'
            )
            debug_handler.setLevel(logging.DEBUG)
            debug_handler.setFormatter(dev_formatter)
            logger.addHandler(debug_handler)

    def _add_test_handlers(self, logger: logging.Logger) -> None:
        """Add test environment handlers.

        Args:
            logger: Logger to configure
        """
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.WARNING)  # Only warnings and errors during tests

        test_formatter = logging.Formatter(
            fmt='TEST | %(levelname)s | %(name)s | %(message)s'
        )
        console_handler.setFormatter(test_formatter)

        logger.addHandler(console_handler)

    def _configure_component_loggers(self) -> None:
        """Configure individual component loggers."""
        for component, logger_name in self.COMPONENTS.items():
            logger = logging.getLogger(logger_name)
            logger.setLevel(self.log_level)

            logger.filters = [f for f in logger.filters if not isinstance(f, ContextFilter)]
            logger.addFilter(ContextFilter({'component': component}))

    def get_logger(self, name: str) -> logging.Logger:
        """Get a logger instance.

        Args:
            name: Logger name

        Returns:
            logging.Logger: Configured logger instance
        """
        return logging.getLogger(name)

    def get_component_logger(self, component: str) -> logging.Logger:
        """Get a component-specific logger.

        Args:
            component: Component name (scoring, ranking, report, catalog)

        Returns:
            logging.Logger: Component logger

        Raises:
            ValueError: If component is not recognized
        """
        if component not in self.COMPONENTS:
            raise ValueError(f"Unknown component: {component}. Available: {list(self.COMPONENTS.keys())}")

        return logging.getLogger(self.COMPONENTS[component])


# Global logger configuration instance
_logger_config: Optional[LoggerConfig] = None


def setup_logging(
    environment: str = 'development',
    log_level: str = 'INFO',
    log_dir: Optional[str] = None
) -> LoggerConfig:
    """Setup application logging.

    Args:
        environment: Environment name
        log_level: Log level
        log_dir: Optional directory for log files

    Returns:
        LoggerConfig: Configured logger instance
    """
    global _logger_config
    _logger_config = LoggerConfig(environment, log_level, log_dir)
    return _logger_config


def get_logger(name: str = __name__) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Logger name, defaults to caller's module name

    Returns:
        logging.Logger: Logger instance
    """
    if _logger_config is None:
        setup_logging()

    return _logger_config.get_logger(name)


def get_component_logger(component: str) -> logging.Logger:
    """Get a component-specific logger.

    Args:
        component: Component name

    Returns:
        logging.Logger: Component logger
    """
    if _logger_config is None:
        setup_logging()

    return _logger_config.get_component_logger(component)


def get_scoring_logger() -> logging.Logger:
    """Get scoring component logger."""
    return get_component_logger('scoring')


def get_ranking_logger() -> logging.Logger:
    """Get ranking component logger."""
    return get_component_logger('ranking')


def get_report_logger() -> logging.Logger:
    """Get report component logger."""
    return get_component_logger('report')


def get_catalog_logger() -> logging.Logger:
    """Get catalog component logger."""
    return get_component_logger('catalog')


class PerformanceLogger:
    """Context manager for performance logging."""

    def __init__(self, operation: str, logger: Optional[logging.Logger] = None, extra: Optional[Dict[str, Any]] = None):
        """Initialize performance logger.

        Args:
            operation: Operation name
            logger: Logger instance
            extra: Additional fields to log
        """
        self.operation = operation
        self.logger = logger or get_logger()
        self.extra = extra or {}
        self.start_time: Optional[datetime] = None

    def __enter__(self) -> 'PerformanceLogger':
        """Start timing."""
        self.start_time = datetime.utcnow()
        self.logger.debug(f"Starting {self.operation}", extra={
            'operation': self.operation,
            'event_type': 'performance_start',
            **self.extra
        })
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """End timing and log result."""
        if self.start_time:
            duration = datetime.utcnow() - self.start_time
            duration_ms = duration.total_seconds() * 1000

            level = logging.WARNING if duration_ms > 1000 else logging.DEBUG

            self.logger.log(level, f"Completed {self.operation}", extra={
                'operation': self.operation,
                'duration_ms': duration_ms,
                'event_type': 'performance_end',
                'success': exc_type is None,
                **self.extra
            })
