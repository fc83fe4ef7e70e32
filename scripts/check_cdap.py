#!/usr/bin/env python3
# scripts/check_cdap.py
# Drop-in for a Nagios plugin directory when the package is installed but the
# console script is not on Nagios' PATH.
import sys

from check_cdap.cli.check_cdap import main

if __name__ == "__main__":
    sys.exit(main())
