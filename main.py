import sys

from domain_checker.cli import main

if __name__ == "__main__":
    sys.exit(main())
