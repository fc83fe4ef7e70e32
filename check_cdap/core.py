# check_cdap/core.py
import logging

import httpx

from check_cdap.client.status_client import fetch_status
from check_cdap.config import CheckConfig
from check_cdap.errors import MalformedResponseError
from check_cdap.models import CheckResult
from check_cdap.status.parser import parse_services
from check_cdap.status.verdict import evaluate_services, verdict_for_http_status

logger = logging.getLogger(__name__)


def run_check(cfg: CheckConfig, client: httpx.Client | None = None) -> CheckResult:
    """
    One full check: request, HTTP triage, body parse, aggregate.

    ConfigError from the client propagates; a malformed body is reported as a
    CRITICAL result.
    """
    reply = fetch_status(cfg, client=client)

    early = verdict_for_http_status(reply.status_code, reply.url, token_supplied=bool(cfg.token))
    if early is not None:
        return early

    try:
        services = parse_services(reply.body)
    except MalformedResponseError as e:
        logger.debug("unparseable body: %r", reply.body)
        return CheckResult(state=e.state, message=f"Malformed status response: {e}")

    logger.debug("parsed %d services: %s", len(services), [s.name for s in services])
    return evaluate_services(services)
