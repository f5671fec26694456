"""Allow ``python -m campus_noc``."""

from campus_noc.cli import app


if __name__ == '__main__':
    app()
