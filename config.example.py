# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "BARTASKS_APP_NAME": "Name shown in the status line (default: BarTasks).",
    "BARTASKS_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    # Shell
    "BARTASKS_START_SHOWN": "Open the popover on start (true/false, default: true).",
    # Paths
    "BARTASKS_DATA_DIR": "Local data directory (default: ~/.local/share/bartasks).",
    "BARTASKS_STORE_PATH": "Key-value store file (default: <data_dir>/defaults.json).",
    # Storage keys
    "BARTASKS_NOW_KEY": "Key of the Now list (default: nowItems; completed: nowItemsDeleted).",
    "BARTASKS_LATER_KEY": "Key of the Later list (default: laterItems; completed: laterItemsDeleted).",
}
