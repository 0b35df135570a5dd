import logging
import sys
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Сторонние библиотеки, которые слишком болтливы на INFO
NOISY_LOGGERS = ("httpx", "httpcore", "passlib", "multipart", "sqlalchemy.engine")


def setup_logging(level: Union[str, int] = logging.INFO, log_dir: Optional[Union[str, Path]] = None) -> None:
    """
    Настроить корневой логгер:
    - консольный обработчик с уровнем level
    - файловый обработчик (DEBUG) в log_dir/task_manager.log, если log_dir задан

    Повторный вызов заменяет обработчики, а не дублирует их.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG if log_dir else level)

    for handler in list(root.handlers):
        root.removeHandler(handler)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(fmt)
    root.addHandler(console)

    if log_dir:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(str(log_dir / "task_manager.log"), encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(fmt)
        root.addHandler(file_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.captureWarnings(True)
