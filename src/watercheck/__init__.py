# SPDX-License-Identifier: MIT

from watercheck.cleanup import register_cleanup
from watercheck.initialize import initialize
from watercheck.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
