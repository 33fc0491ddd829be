from .base import *  # noqa: F401,F403
from .base import db_config_from_env, env_flag

DB_CONFIG = db_config_from_env(default_database="timeclock_test")

DEBUG = False
TESTING = True

AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "0")

# Tests drive the archive jobs explicitly.
ARCHIVE_ON_STARTUP = False
ARCHIVE_SCHEDULER = False
