import logging
import logging.handlers
from pathlib import Path
from typing import Optional

DEFAULT_LOG_DIR = Path(__file__).parent.parent / "logs"
LOG_FILE_NAME = "whatif_engine.log"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(log_level: str = "INFO", log_dir: Optional[Path] = None) -> Path:
    """Configure root logging for scenario runs.

    Installs a rotating file handler (5MB, 3 backups) that records everything
    from DEBUG up, plus a console handler at *log_level*. Calling it again
    once handlers exist is a no-op.

    Returns:
        Path to the log file.
    """
    log_dir = log_dir or DEFAULT_LOG_DIR
    log_file = log_dir / LOG_FILE_NAME

    root_logger = logging.getLogger()
    if root_logger.handlers:
        return log_file  # Already configured

    log_dir.mkdir(parents=True, exist_ok=True)
    level = getattr(logging, log_level.upper(), logging.INFO)
    root_logger.setLevel(logging.DEBUG)

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    file_handler = logging.handlers.RotatingFileHandler(
        log_file, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    logging.getLogger(__name__).info(
        "Logging initialized (console=%s, file=%s)", log_level, log_file
    )
    return log_file
