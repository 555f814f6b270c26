import os

HOST = os.getenv("HOST", "127.0.0.1")
PORT = os.getenv("PORT", "5000")

SECRET_KEY = os.getenv("SECRET_KEY", "dev")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Reject non-numeric move coordinates instead of reading them as 0
TIC_TAC_TOE_STRICT_COORDINATES = os.getenv(
    "TIC_TAC_TOE_STRICT_COORDINATES", "false"
).lower() in ("1", "true", "yes")

# Jinja2 whitespace control - prevents unwanted line breaks in rendered HTML
JINJA2_TRIM_BLOCKS = True
JINJA2_LSTRIP_BLOCKS = True
