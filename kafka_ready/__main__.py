"""Allow ``python -m kafka_ready``"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
