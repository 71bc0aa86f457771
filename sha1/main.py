import logging
import os
import sys

from sha1.digest import format_digest, sha1
from sha1.errors import SHA1Error

logger = logging.getLogger("SHA-1")

DEFAULT_MESSAGE = "abc"


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    if argv is None:
        argv = sys.argv[1:]
    messages = argv or [DEFAULT_MESSAGE]
    for text in messages:
        logger.info(f"Message: {text!r}")
        try:
            # argv bytes are recovered as-is, including surrogate-escaped ones
            words = sha1(os.fsencode(text))
        except SHA1Error as e:
            logger.error(f"Digest computation failed: {e}")
            return 1
        print(f"SHA-1: {format_digest(words)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
