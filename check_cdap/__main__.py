# check_cdap/__main__.py
import sys

from check_cdap.cli.check_cdap import main

if __name__ == "__main__":
    sys.exit(main())
