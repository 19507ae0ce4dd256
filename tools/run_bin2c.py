import sys

from bin2c.cli import main

if __name__ == "__main__":
    sys.exit(main())
