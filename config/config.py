"""
Configuration settings for the Urlbox client.
"""
import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Log files go to a user-writable directory, never next to the installed package
LOGS_DIR = Path(os.getenv("URLBOX_LOG_DIR", Path.home() / ".urlbox" / "logs"))

# Urlbox API settings
URLBOX_SETTINGS = {
    "base_url": os.getenv("URLBOX_BASE_URL", "https://api.urlbox.io/v1/"),
    "api_key": os.getenv("URLBOX_API_KEY", ""),
    "bearer_token": os.getenv("URLBOX_SECRET_KEY", ""),
    "user_agent": "urlbox-client/0.1.0",
}

# Values applied to every option the caller leaves unset
SCREENSHOT_DEFAULTS = {
    "format": "png",
    "full_page": False,
    "width": 1280,
    "block_ads": True,
    "hide_cookie_banners": True,
    "click_accept": True,
    "selector": "",
    "fail_if_selector_missing": False,
    "retina": False,
    "quality": 80,
    "delay": 0,      # milliseconds
    "timeout": 30000,  # milliseconds
}

# Logging settings
LOGGING_SETTINGS = {
    "level": os.getenv("LOG_LEVEL", "INFO"),
    "format": "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}",
    "rotation": "100 MB",
    "retention": "1 month",
    "backtrace": True,  # Show traceback information
    "diagnose": False,  # Variable values would leak credentials into the log
    "enqueue": True,    # Thread-safe logging
    "colorize": True,   # Use colors in console output
}
