# SPDX-License-Identifier: MIT

from daybook.cleanup import register_cleanup
from daybook.initialize import initialize
from daybook.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
