"""
Print the sample circulation report.

Usage:
    $ python -m circulation

Same output as ``flask --app circulation demo``.
"""
import sys

import click

from circulation import create_app
from circulation.controllers.demo import run_demo


def main():
    app = create_app()
    with app.app_context():
        try:
            run_demo(app.config)
        except click.ClickException as e:
            e.show()
            sys.exit(e.exit_code)


if __name__ == "__main__":
    main()
