import os

DEBUG = False

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
