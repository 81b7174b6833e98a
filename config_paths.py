import json
import logging
import os

logger = logging.getLogger(__name__)

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "csvpager")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")
LOG_PATH = os.path.join(CONFIG_DIR, "csvpager.log")

# default settings
DELIMITER_DEFAULT = ","
ENCODING_DEFAULT = "utf-8"
COLUMN_WIDTHS_DEFAULT = "per_column"
LOG_LEVEL_DEFAULT = "WARNING"

COLUMN_WIDTH_CHOICES = ("per_column", "uniform")
LOG_LEVEL_CHOICES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def ensure_config_dirs():
    try:
        os.makedirs(CONFIG_DIR, exist_ok=True)
    except OSError:
        return False
    return True


def load_config():
    cfg = {
        "DELIMITER": DELIMITER_DEFAULT,
        "ENCODING": ENCODING_DEFAULT,
        "COLUMN_WIDTHS": COLUMN_WIDTHS_DEFAULT,
        "LOG_LEVEL": LOG_LEVEL_DEFAULT,
    }

    if not os.path.exists(CONFIG_JSON):
        return cfg

    try:
        with open(CONFIG_JSON, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_JSON, exc)
        return cfg

    if not isinstance(data, dict):
        return cfg

    delimiter = data.get("delimiter")
    if isinstance(delimiter, str) and len(delimiter) == 1:
        cfg["DELIMITER"] = delimiter

    encoding = data.get("encoding")
    if isinstance(encoding, str) and encoding.strip():
        cfg["ENCODING"] = encoding.strip()

    widths = data.get("column_widths")
    if widths in COLUMN_WIDTH_CHOICES:
        cfg["COLUMN_WIDTHS"] = widths

    level = data.get("log_level")
    if isinstance(level, str) and level.upper() in LOG_LEVEL_CHOICES:
        cfg["LOG_LEVEL"] = level.upper()

    return cfg
