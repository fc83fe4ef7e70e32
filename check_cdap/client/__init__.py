# check_cdap/client/__init__.py

from .status_client import STATUS_PATH, fetch_status, status_url

__all__ = ["STATUS_PATH", "fetch_status", "status_url"]
