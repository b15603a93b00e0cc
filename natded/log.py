# natded/log.py
import logging
import sys

from natded.config import Config

def setup_logger(name=Config.LOGGER_NAME, level=None):
  logger = logging.getLogger(name)
  logger.setLevel(level or Config.LOG_LEVEL)

  if not any(type(handler) is logging.StreamHandler for handler in logger.handlers):
    handler = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter(Config.LOG_FORMAT)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
  return logger
