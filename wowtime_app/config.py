# wowtime_app/config.py

from dataclasses import dataclass
from typing import Optional

@dataclass
class AppConfig:
    """Application configuration settings."""
    app_name: str = "WowTime"
    version: str = "1.0.0"
    log_file: str = "wowtime_app.log"
    log_level: str = "INFO"
    save_logs: bool = False
    timezone: Optional[str] = None  # IANA name, None = host local time
