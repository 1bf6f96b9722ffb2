import os

from config import db_config_from_env, env_flag

DB_CONFIG = db_config_from_env()

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_JSON = env_flag("LOG_JSON", False)

# schema.sql only uses CREATE TABLE IF NOT EXISTS, so re-applying it on every start is safe
AUTO_INIT_DB = env_flag("AUTO_INIT_DB", True)
AUTO_SEED_DB = env_flag("AUTO_SEED_DB", False)
