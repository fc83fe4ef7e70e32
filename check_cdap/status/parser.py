# check_cdap/status/parser.py
"""
Parse the body of /v3/system/services/status into (name, status) pairs.

The router answers with a flat object such as

    {"appfabric":"OK","dataset.executor":"NOTOK","metrics":"OK"}

Only that shape is accepted: comma separated "name":"status" pairs, optionally
wrapped in braces. Anything else is reported as malformed rather than guessed at.
"""
from check_cdap.errors import MalformedResponseError
from check_cdap.models import ServiceStatus


def _unquote(token: str, what: str, pair: str) -> str:
    token = token.strip()
    if len(token) < 2 or not (token.startswith('"') and token.endswith('"')):
        raise MalformedResponseError(f"missing quotes around {what} in {pair!r}")
    value = token[1:-1]
    if not value.strip():
        raise MalformedResponseError(f"empty {what} in {pair!r}")
    return value


def _strip_braces(body: str) -> str:
    text = body.strip()
    opened, closed = text.startswith("{"), text.endswith("}")
    if opened != closed:
        # usually a truncated response
        raise MalformedResponseError(f"unbalanced braces in {text!r}")
    if opened:
        text = text[1:-1]
    return text.strip()


def _split_pairs(text: str) -> list[str]:
    """Split on commas that sit outside double quotes."""
    pairs: list[str] = []
    start = 0
    quoted = False
    for i, ch in enumerate(text):
        if ch == '"':
            quoted = not quoted
        elif ch == "," and not quoted:
            pairs.append(text[start:i])
            start = i + 1
    pairs.append(text[start:])
    return pairs


def parse_services(body: str) -> list[ServiceStatus]:
    """
    Split a status body into ServiceStatus entries, keeping response order.

    Raises:
        MalformedResponseError: a pair has no ':', a side is not double quoted,
            a name/status is empty, or a brace is unmatched.
    """
    text = _strip_braces(body or "")
    if not text:
        return []

    services: list[ServiceStatus] = []
    for raw in _split_pairs(text):
        pair = raw.strip()
        name, sep, status = pair.partition(":")
        if not sep:
            raise MalformedResponseError(f"expected \"name\":\"status\", got {pair!r}")
        services.append(
            ServiceStatus(
                name=_unquote(name, "service name", pair),
                status=_unquote(status, "status", pair),
            )
        )
    return services
