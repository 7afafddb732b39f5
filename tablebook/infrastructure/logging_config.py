import logging


def configure_logging(level: str = "INFO") -> None:
    """Raises ValueError for a level name logging does not know."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s  %(levelname)-7s  %(name)s  %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
