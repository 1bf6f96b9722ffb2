import os

from config import db_config_from_env, env_flag

DB_CONFIG = db_config_from_env(default_user="time_tracking")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_JSON = env_flag("LOG_JSON", True)

# Schema changes go through scripts/init_db.py in production.
AUTO_INIT_DB = env_flag("AUTO_INIT_DB", False)
AUTO_SEED_DB = False
