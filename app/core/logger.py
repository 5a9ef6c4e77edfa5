import sys
from loguru import logger
import logging

from app.core.config import settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<magenta>{extra[client]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[client]} | {name}:{function}:{line} - {message}"

class InterceptHandler(logging.Handler):
    def emit(self, record):
        # Get corresponding Loguru level if it exists
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message
        frame, depth = logging.currentframe(), 2
        while frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())

def setup_logging(level: str = None):
    """
    Routes everything through loguru. Every record carries `client`
    (the requesting address, '-' outside a request), set per request with
    logger.contextualize in app.main.
    """
    level = (level or settings.LOG_LEVEL).upper()

    logger.remove() # Remove default handler
    logger.configure(extra={"client": "-"})

    logger.add(sys.stdout, level=level, format=CONSOLE_FORMAT)

    # Errors only, rotated
    logger.add(
        "logs/errors.log",
        level="ERROR",
        rotation="10 MB",
        retention="1 month",
        compression="zip",
        format=FILE_FORMAT
    )

    # Intercept standard logging messages (uvicorn, httpx, supabase)
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    # Silence noisy libraries
    for noisy in ("uvicorn.access", "httpx", "httpcore", "hpack"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

# Export singleton logger
__all__ = ["logger", "setup_logging"]
