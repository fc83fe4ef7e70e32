# check_cdap/errors.py
from check_cdap.models import NagiosState


class CheckError(Exception):
    """Base error; carries the Nagios state the failure should be reported as."""

    state = NagiosState.UNKNOWN


class ConfigError(CheckError):
    state = NagiosState.UNKNOWN


class MalformedResponseError(CheckError):
    state = NagiosState.CRITICAL
