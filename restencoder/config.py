"""Encoder settings read from the environment."""

import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

JSON_CONTENT_TYPE = os.environ.get(
    "RESTENCODER_JSON_CONTENT_TYPE", "application/json; charset=utf-8"
)
JSON_ENSURE_ASCII = os.environ.get("RESTENCODER_JSON_ENSURE_ASCII", "false").lower() == "true"
JSON_TRAILING_NEWLINE = (
    os.environ.get("RESTENCODER_JSON_TRAILING_NEWLINE", "true").lower() == "true"
)
JSON_ESCAPE_HTML = os.environ.get("RESTENCODER_JSON_ESCAPE_HTML", "true").lower() == "true"
