import logging
import os
import sys

from db import DATABASE_URL
from menu import MenuController
from session import SessionState
from store import ScoreStore

logger = logging.getLogger("mathquiz")


def main() -> int:
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "WARNING").upper())

    store = ScoreStore(DATABASE_URL, out=sys.stdout)
    # a failed initialize still lets the menu run; store calls then degrade to no-ops
    if not store.initialize():
        logger.warning("score store unavailable at %s", DATABASE_URL)

    print("Welcome to the Math Quiz Application!")
    controller = MenuController(store, SessionState())
    try:
        return controller.run()
    finally:
        store.close()


if __name__ == "__main__":
    sys.exit(main())
