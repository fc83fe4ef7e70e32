#!/usr/bin/env python3
# check_cdap/cli/check_cdap.py
"""
Nagios plugin: check the health of CDAP system services.

Queries <uri>/v3/system/services/status and reports

    0 OK        every service reports OK
    2 CRITICAL  at least one service reports NOTOK, the endpoint is missing (404)
                or the response cannot be parsed
    3 UNKNOWN   CDAP unreachable (000/503), authentication errors, bad arguments
"""
import argparse
import logging
import sys

import httpx
from dotenv import find_dotenv, load_dotenv

from check_cdap import __version__
from check_cdap.config import DEFAULT_TIMEOUT, ENV_TIMEOUT, ENV_TOKEN, ENV_URI, load_config
from check_cdap.core import run_check
from check_cdap.errors import CheckError, ConfigError
from check_cdap.models import CheckResult, NagiosState
from check_cdap.utils.logging_setup import setup_logging

logger = logging.getLogger(__name__)


class NagiosArgumentParser(argparse.ArgumentParser):
    # argparse exits 2 on bad input, which Nagios would read as CRITICAL
    def error(self, message):
        raise ConfigError(f"{message} (see -h)")


def build_parser() -> NagiosArgumentParser:
    p = NagiosArgumentParser(
        prog="check_cdap",
        description="Check the health of CDAP system services.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
        add_help=False,
    )
    p.add_argument("-u", "--uri", help=f"CDAP router base URI, e.g. https://cdap:11015 (env {ENV_URI})")
    p.add_argument(
        "-t",
        "--timeout",
        help=f"request timeout in seconds (env {ENV_TIMEOUT}, default {DEFAULT_TIMEOUT:g})",
    )
    p.add_argument("-T", "--token", help=f"bearer token for secured clusters (env {ENV_TOKEN})")
    p.add_argument("-k", "--insecure", action="store_true", help="skip TLS certificate verification")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    p.add_argument("-V", "--version", action="store_true", help="print version and exit")
    p.add_argument("-h", "--help", action="store_true", help="show this help and exit")
    return p


def _emit(result: CheckResult) -> int:
    print(result.render())
    return int(result.state)


def main(argv: list[str] | None = None, client: httpx.Client | None = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except ConfigError as e:
        return _emit(CheckResult(state=e.state, message=str(e)))

    if args.help:
        parser.print_help(sys.stdout)
        return int(NagiosState.UNKNOWN)
    if args.version:
        print(f"check_cdap {__version__}")
        return int(NagiosState.UNKNOWN)

    try:
        load_dotenv(find_dotenv(usecwd=True))
        setup_logging(args.verbose)
        cfg = load_config(
            uri=args.uri,
            timeout=args.timeout,
            token=args.token,
            insecure=args.insecure,
            verbose=args.verbose,
        )
        result = run_check(cfg, client=client)
    except CheckError as e:
        result = CheckResult(state=e.state, message=str(e))
    except Exception as e:
        logger.exception("check failed")
        result = CheckResult(state=NagiosState.UNKNOWN, message=f"Unexpected error: {e}")

    return _emit(result)


if __name__ == "__main__":
    sys.exit(main())
