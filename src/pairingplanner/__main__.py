"""Allow ``python -m pairingplanner``."""

import sys

from pairingplanner.cli import main

if __name__ == "__main__":
    sys.exit(main())
