import click
from flask import Blueprint, current_app

from ..models.store import Store
from ..seeds import SAMPLE_LATE_RETURN, SAMPLE_TOP_UPS, load_sample
from ..services.circulation_service import CirculationService
from ..services.report import items_section, transaction_section, users_section

# CLI-only blueprint: registers the `demo` command, no routes
bp = Blueprint("demo", __name__, cli_group=None)


def run_demo(config, days_late=None, store=None, echo=click.echo):
    """
    Load the sample data into a fresh store, print the users before and
    after their top-ups, the catalog, then charge the sample late return
    and print its summary. Returns the processed transaction.
    """
    if days_late is None:
        days_late = config.get("DEMO_DAYS_LATE", 5)
        if isinstance(days_late, bool) or not isinstance(days_late, int) or days_late < 0:
            raise click.BadParameter(
                f"must be a non-negative integer, got {days_late!r}",
                param_hint="CIRCULATION_DEMO_DAYS_LATE",
            )
    store = store if store is not None else Store()
    defaults = dict(
        max_borrows=config.get("DEFAULT_MAX_BORROWS"),
        discount_factor=config.get("DEFAULT_DISCOUNT_FACTOR"),
    )

    users, items = load_sample(store, **{k: v for k, v in defaults.items() if v is not None})

    for line in users_section("Users", users):
        echo(line)

    for person_id, amount in SAMPLE_TOP_UPS.items():
        CirculationService.top_up(person_id, amount, store=store)

    echo("")
    for line in users_section("Users After Adding Funds", users):
        echo(line)

    echo("")
    for line in items_section(items):
        echo(line)

    person_id, item_id = SAMPLE_LATE_RETURN
    tx = CirculationService.charge_late_return(person_id, item_id, days_late, store=store)

    echo("")
    for line in transaction_section(tx):
        echo(line)
    return tx


@bp.cli.command("demo")
@click.option("--days-late", type=click.IntRange(min=0), default=None,
              help="Days the sample book is returned late (default from DEMO_DAYS_LATE).")
def demo_command(days_late):
    """Print the sample circulation report."""
    current_app.logger.debug("Running demo (days_late=%s)", days_late)
    run_demo(current_app.config, days_late=days_late)
