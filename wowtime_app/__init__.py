# wowtime_app/__init__.py

from .config import AppConfig
from .date_formatter import DateFormatter, format_date
from .logger import AppLogger

__all__ = ["AppConfig", "AppLogger", "DateFormatter", "format_date"]
