import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Настройка вывода логов в консоль"""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, force=True)
