# check_cdap/status/__init__.py

from .parser import parse_services
from .verdict import NOTOK, OK_MESSAGE, evaluate_services, verdict_for_http_status

__all__ = [
    "NOTOK",
    "OK_MESSAGE",
    "evaluate_services",
    "parse_services",
    "verdict_for_http_status",
]
