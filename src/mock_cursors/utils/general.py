import logging 
import os 

import numpy as np 
import pandas as pd 


def setup_logger(log_file_path:str, logger_name:str, min_level:int=logging.DEBUG, log_format:str='%(asctime)s - %(levelname)s: %(message)s') -> logging.Logger:
    """Sets up a logger to save logs to the given filepath."""
    
    # Init a logger and set the lowest level (DEBUG by default so all logs are captured)
    logger:logging.Logger = logging.getLogger(logger_name)
    logger.setLevel(min_level)
    
    # Prevent double logging if root logger is used
    logger.propagate = False  

    # Avoid duplicate handlers if setup is called multiple times
    if not logger.handlers:
        
        # NOTE: default path if log file path is None or empty string
        if log_file_path is None or not log_file_path: 
            log_file_path = './mock_cursor.log'

        # Create the output dir if it doesn't exist
        log_dir:str = os.path.dirname(log_file_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        # Create a file handler
        file_handler:logging.FileHandler = logging.FileHandler(log_file_path, encoding='utf-8')
        logger.addHandler(file_handler)
        
        # Set the format for logs 
        formatter:logging.Formatter = logging.Formatter(log_format)
        file_handler.setFormatter(formatter)
        
    # Return the logger
    return logger


class LoggingMixin(object):
    """Shared logging helpers. Instances opt in through [enable_logging] and a [logger] attribute; 
    with either missing every helper is a no-op."""

    enable_logging:bool = False                 # Whether this instance writes logs at all
    logger:logging.Logger|None = None           # Logger for debug/info/etc

    def configure_logging(
            self,
            enable_logging:bool,
            log_file_path:str,
            logger_name:str,
            logger_min_level:int,
            logger_format:str,
        ) -> None:
        """Sets [enable_logging] and, if enabled, initializes [logger] via setup_logger()."""
        self.enable_logging = enable_logging
        if enable_logging:
            self.logger = setup_logger(
                log_file_path=log_file_path,
                logger_name=logger_name,
                min_level=logger_min_level,
                log_format=logger_format,
            )


    def share_logging(self, other:"LoggingMixin") -> None:
        """Use the same logging settings as [other]."""
        self.enable_logging = other.enable_logging
        self.logger = other.logger


    def _log(
        self,
        level:int,
        fmt:str,
        *args,
        exc:BaseException|None=None,
        stacklevel:int=3,
    ) -> None:
        """Writes one record for a cursor operation, or nothing when logging is off for this cursor.
        [fmt] and [args] go to the logger unformatted."""

        # Logging disabled or never configured
        if not getattr(self, "enable_logging", False): return
        logger:logging.Logger = getattr(self, "logger", None)
        if logger is None: return

        logger.log(level, fmt, *args, exc_info=exc, stacklevel=stacklevel)


    def log_debug(self, operation:str, fmt:str, *args) -> None: 
        """Logs a DEBUG record "[operation]: [fmt % args]", e.g. log_debug('advance()', 'Positioned on row %d.', 3)."""
        self._log(logging.DEBUG, "%s: " + fmt, operation, *args)


    def log_error(self, operation:str, exception:Exception) -> None: 
        """Logs the cursor error that [operation] is about to raise, with its traceback."""
        self._log(logging.ERROR, "%s failed: %s - %s", operation, type(exception).__name__, exception, exc=exception)


def is_null_scalar(value:object) -> bool:
    """Returns True if [value] is a missing-value marker (None, NaN, pd.NA, pd.NaT). Non-scalars are never null."""
    if value is None: return True
    try:
        if np.ndim(value) != 0: return False
        return bool(pd.isna(value))
    except (TypeError, ValueError): 
        return False


def normalize_row(row) -> tuple:
    """Converts one row (any sequence) to a tuple, with missing markers replaced by None and numpy scalars 
    unwrapped to plain Python values."""
    values:list = []
    for v in row:
        if is_null_scalar(v): values.append(None)
        elif isinstance(v, np.generic): values.append(v.item())
        else: values.append(v)
    return tuple(values)
