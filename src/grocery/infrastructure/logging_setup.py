import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # Inventory alarms must be visible whatever the configured level.
    logging.getLogger("grocery.alarm").setLevel(logging.WARNING)
