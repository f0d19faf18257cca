import sys
from loguru import logger
from config.settings import settings
from cli.commands import cli


def configure_logging(level=None, log_file=None):
    """Coloured console sink plus a rotating DEBUG file sink."""
    logger.remove()
    logger.add(sys.stderr, level=level or settings.LOG_LEVEL,
               format="<green>{time:HH:mm:ss}</green> | <level>{level:<8}</level> | {message}",
               colorize=True)
    logger.add(log_file or settings.LOG_FILE, level="DEBUG", rotation="10 MB",
               format="{time} | {level} | {message}")


def main():
    configure_logging()
    cli()


if __name__ == "__main__":
    main()
