"""Command-line interface for json-harness."""

import click

from json_harness.adapters import ADAPTERS, make_adapters
from json_harness.benchmarks import MODES, run_benchmarks
from json_harness.loader import load_documents
from json_harness.report import Reporter


@click.command()
@click.argument("files", nargs=-1)
@click.option('--mode', '-m', type=click.Choice(MODES), default="parse", help='Which benchmark to run', show_default=True)
@click.option('--library', '-l', 'libraries', multiple=True, type=click.Choice(list(ADAPTERS)), help='Library to measure; repeat to pick several (default: all)')
@click.option('--list-libraries', is_flag=True, help='Print the available library names and exit')
def main(files, mode, libraries, list_libraries):
    """Time JSON parse/serialize for each library on each of FILES."""
    if list_libraries:
        for name in ADAPTERS:
            click.echo(name)
        return

    # Everything is read before the first trial so no I/O lands in a timed region.
    documents = load_documents(files)
    adapters = make_adapters(libraries or None)
    run_benchmarks(documents, adapters, Reporter(), mode=mode)


if __name__ == "__main__":
    main()
