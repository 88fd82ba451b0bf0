import os

# Environment constants to avoid typos in comparisons
ENV_DEV = "dev"
ENV_PROD = "prod"

# Simple env flag: "dev" for local testing defaults, defaulting to "prod"
APP_ENV = os.getenv("APP_ENV", ENV_PROD).lower()

# Log level for the dashboard; dev runs are chattier by default
LOG_LEVEL = os.getenv(
    "CIDERPLAN_LOG_LEVEL", "DEBUG" if APP_ENV == ENV_DEV else "INFO"
).upper()
