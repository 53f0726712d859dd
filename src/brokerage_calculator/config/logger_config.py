import os
import logging

from datetime import datetime

from pythonjsonlogger import jsonlogger


DEFAULT_LOG_DIR = os.getenv("BROKERAGE_LOG_DIR", "logs")


def setup_logger(name="BrokerageCalculator", log_dir=None, level=logging.INFO):
    """
    Set up a logger with JSON formatting for structured logging.

    Parameters:
        name (str): Logger name
        log_dir (str): Directory for log files (defaults to BROKERAGE_LOG_DIR or ./logs)
        level (int): Logging level for the logger and its handlers

    Returns:
        logging.Logger: Configured logger instance
    """
    log_dir = log_dir or DEFAULT_LOG_DIR
    os.makedirs(log_dir, exist_ok=True)

    date_str = datetime.now().strftime("%Y-%m-%d")
    log_file = os.path.join(log_dir, f"brokerage_calculator_{date_str}.log")

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid duplicate handlers if setup is called multiple times
    if logger.hasHandlers():
        logger.handlers.clear()

    logger.propagate = False

    file_handler = logging.FileHandler(log_file, mode='a')
    file_handler.setLevel(level)
    json_format = jsonlogger.JsonFormatter(
        '%(asctime)s %(levelname)s %(name)s %(message)s',
        rename_fields={'asctime': 'timestamp', 'levelname': 'level'}
    )
    file_handler.setFormatter(json_format)

    # Console Handler (human-readable for debugging)
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_format = logging.Formatter('%(levelname)s | %(name)s | %(message)s')
    console_handler.setFormatter(console_format)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    return logger
