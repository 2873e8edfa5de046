from arclead.server.config import config
from arclead.log import configure_logging

configure_logging(config.log_level, config.log_file)

from arclead.server.core import app


__all__ = ["app"]
