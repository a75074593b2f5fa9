import logging


logger = logging.getLogger("idm_sim")


def setup_logging(level: int | str = logging.INFO) -> None:
    """
    Configure the root handler for the demo and scripts.

    :param level: logging level, as a number or a name such as "DEBUG"
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level '{level}'")
        level = resolved

    logging.basicConfig(
        level=level,
        format="[%(asctime)s] [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    logger.setLevel(level)
