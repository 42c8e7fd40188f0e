import logging
import sys
from typing import TextIO


def configure_logging(log_level: str, stream: TextIO | None = None) -> None:
    # The console menu owns stdout, so it passes stderr here.
    logging.basicConfig(
        stream=stream or sys.stdout,
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )
