"""
Logging setup for the Catalog API.

``setup_logging`` is called by the application factory.  Records from
the service and from the MongoDB driver go to stderr and, when
``LOG_FILE`` is set, to that file as well.  The driver's own loggers
are held at WARNING unless the service itself runs at DEBUG, since
pymongo emits a record per command and per connection event.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

DRIVER_LOGGERS = ("pymongo", "motor")

_configured = False


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach the service handlers to the root logger.

    Repeated calls are no-ops; the test suite builds many apps in one
    process.
    """
    global _configured
    if _configured:
        return

    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    root = logging.getLogger()
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(numeric_level)

    driver_level = logging.DEBUG if numeric_level <= logging.DEBUG else logging.WARNING
    for name in DRIVER_LOGGERS:
        logging.getLogger(name).setLevel(driver_level)

    _configured = True
