import os

from . import env_bool
from .base import *  # noqa: F401,F403

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False

AUTO_INIT_DB = env_bool("AUTO_INIT_DB", False)
AUTO_SEED_DB = env_bool("AUTO_SEED_DB", False)
