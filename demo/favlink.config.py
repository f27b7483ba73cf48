"""Favlink configuration for the demo site."""
from pathlib import Path

CONTENT_DIR = Path(__file__).parent / "content"

DEBUG = True
HOST = "127.0.0.1"
PORT = 3000
LOG_LEVEL = "debug"
