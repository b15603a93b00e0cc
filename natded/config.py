# natded/config.py
import os

class Config:
  LOGGER_NAME = "natded"
  LOG_LEVEL = os.getenv("NATDED_LOG_LEVEL", "WARNING").upper()
  LOG_FORMAT = '%(asctime)s - [%(levelname)s] - %(name)s - %(message)s'
