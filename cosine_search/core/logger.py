import logging

from cosine_search.core.config import LOG_LEVEL

LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("cosine_search").setLevel(level)
    # nltk is chatty on import
    logging.getLogger("nltk").setLevel(logging.WARNING)
