import logging
import sys
from rpsbot.common.logs import configure_logging
from rpsbot.rps.rps_console import main


if __name__ == "__main__":
    configure_logging(level=logging.WARNING)
    sys.exit(main())
