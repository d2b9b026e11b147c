import os

DEBUG = False
TESTING = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
