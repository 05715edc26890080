"""Command-line demo: insert one user into a RealWorld and print it."""

from __future__ import annotations

import logging

from layered.core.types import Email, Name
from layered.env import RealWorld

logger = logging.getLogger("layered.main")


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")

    app = RealWorld()
    name = Name("user_a")
    app.user_repository.insert(name, Email("user_a@example.com"))
    logger.info("Inserted demo user %s", name)

    print(repr(app.get(name)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
