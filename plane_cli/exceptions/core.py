from structlog.types import FilteringBoundLogger


class PlaneCliError(Exception):
    """Base exception for all plane-cli errors.

    Each exception can define a log_category for consistent logging and an
    optional hint with actionable guidance shown below the message.
    """

    log_category: str = 'plane_cli_error'

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint

    @classmethod
    def get_log_category(cls) -> str:
        """Get the log category for this exception type."""
        return cls.log_category


def log_exception(logger: FilteringBoundLogger, exc: Exception) -> None:
    """Log an exception with the appropriate category.

    If the exception is a PlaneCliError, uses its log_category.
    Otherwise uses a generic category based on exception type. Logged at debug
    level: the user-facing message is rendered separately on stderr.

    Args:
        logger: The logger instance to use (from hotlog.get_logger)
        exc: The exception to log
    """
    category = exc.get_log_category() if isinstance(exc, PlaneCliError) else f'{exc.__class__.__name__.lower()}'
    logger.debug(category, error=str(exc), exc_info=exc)
