from .general import setup_logger, LoggingMixin, is_null_scalar, normalize_row

__all__ = [
    "setup_logger",
    "LoggingMixin",
    "is_null_scalar",
    "normalize_row",
]
