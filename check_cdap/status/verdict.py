# check_cdap/status/verdict.py
"""
Turn an HTTP status code or a list of service statuses into a Nagios verdict.
"""
from check_cdap.models import CheckResult, NagiosState, ServiceStatus

NOTOK = "NOTOK"
OK_MESSAGE = "All CDAP system services are OK"

# codes that mean "nobody answered"; 0 is curl's 000
SERVICE_DOWN_CODES = (0, 503)


def verdict_for_http_status(status_code: int, url: str, token_supplied: bool = False) -> CheckResult | None:
    """
    Map a non-200 HTTP status to a final result.

    Returns None for 200, meaning the body should be parsed.
    """
    if status_code == 200:
        return None

    if status_code == 401:
        if token_supplied:
            msg = "Authentication failed (HTTP 401), the supplied token was rejected"
        else:
            msg = "Authentication required (HTTP 401), supply a token with -T or CHECK_CDAP_TOKEN"
        return CheckResult(state=NagiosState.UNKNOWN, message=msg)

    if status_code == 404:
        return CheckResult(
            state=NagiosState.CRITICAL,
            message=f"Status endpoint not found (HTTP 404) at {url}",
        )

    if status_code in SERVICE_DOWN_CODES:
        return CheckResult(
            state=NagiosState.UNKNOWN,
            message=f"CDAP is down or unreachable (HTTP {status_code:03d}) at {url}",
        )

    return CheckResult(
        state=NagiosState.UNKNOWN,
        message=f"Unexpected HTTP status {status_code} from {url}",
    )


def evaluate_services(services: list[ServiceStatus]) -> CheckResult:
    """CRITICAL if any status contains NOTOK, otherwise the fixed OK message."""
    failing = [s for s in services if NOTOK in s.status]
    if not failing:
        return CheckResult(state=NagiosState.OK, message=OK_MESSAGE)

    listing = ", ".join(f"{s.name}={s.status}" for s in failing)
    return CheckResult(
        state=NagiosState.CRITICAL,
        message=f"{len(failing)} of {len(services)} CDAP services not OK: {listing}",
    )
