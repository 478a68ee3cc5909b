"""Entry point for `python -m themekit`."""

import sys


def main():
    from themekit.app import run_app
    sys.exit(run_app())


if __name__ == "__main__":
    main()
