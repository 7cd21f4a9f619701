import os

from loguru import logger

LOG_DIR = os.getenv("LOG_DIR", "logs")
LOG_FORMAT = "{time} | {level} | {message}"

os.makedirs(LOG_DIR, exist_ok=True)


def _file_sink(filename: str, level: str = "INFO", log_type: str | None = None, **options):
    """Weekly-rotated file under LOG_DIR, optionally only for one ``log_type``."""
    if log_type is not None:
        options["filter"] = lambda record: record["extra"].get("log_type") == log_type

    logger.add(
        os.path.join(LOG_DIR, filename),
        rotation="1 week",
        retention=options.pop("retention", "4 weeks"),
        level=level,
        enqueue=True,
        format=LOG_FORMAT,
        **options,
    )


# Drop loguru's stderr handler; everything goes to files
logger.remove()

_file_sink("app.log")
# logger.bind(log_type="booking"): ledger writes (create, status, cancel)
_file_sink("bookings.log", log_type="booking")
# logger.bind(log_type="admin"): catalog edits, date blocks, admin accounts
_file_sink("admin.log", log_type="admin")
_file_sink("errors.log", level="ERROR", retention="8 weeks")


def get_logger():
    return logger
