"""Main CLI entry point.

    envscope                     # auto-detect GitHub Actions
    envscope --output plain      # titled blocks, no ::group:: markers
    envscope --no-system --name CI
"""

import os

import click

from envscope import __version__
from envscope.foundation.config import OUTPUT_MODES, load_config
from envscope.foundation.logging import configure_logging
from envscope.inspection.providers import ProcessDataProvider
from envscope.orchestrator import get_input, run
from envscope.output.sinks import select_sink


@click.command("envscope")
@click.option(
    "--output",
    "-o",
    type=click.Choice(OUTPUT_MODES),
    default=None,
    help="Output style (default: auto, GitHub groups when in Actions)",
)
@click.option("--delimiter", "-d", default=None, help="Prefix delimiter for grouping (default: _)")
@click.option("--runner/--no-runner", "show_runner", default=None, help="Show runner information")
@click.option("--system/--no-system", "show_system", default=None, help="Show system information")
@click.option("--name", default=None, help="Greet NAME before the report (default: INPUT_NAME)")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML settings file",
)
@click.option("--debug", is_flag=True, help="Debug logging on stderr")
@click.option("--json-errors", is_flag=True, help="Report fatal errors as JSON on stderr")
@click.version_option(version=__version__)
def main(
    output: str | None,
    delimiter: str | None,
    show_runner: bool | None,
    show_system: bool | None,
    name: str | None,
    config_path: str | None,
    debug: bool,
    json_errors: bool,
) -> None:
    """Print the CI job's environment variables and host information.

    \b
    Sections, in order:
        Runner Information     interpreter, platform, working directory
        Variables (N)          variables without a shared prefix
        <PREFIX> Variables     one section per shared prefix (GITHUB, RUNNER, ...)
        System Information     process ids, memory, CPU, OS facts
    """
    configure_logging(debug=debug)

    try:
        config = load_config(
            config_path,
            overrides={
                "output": output,
                "delimiter": delimiter,
                "show_runner": show_runner,
                "show_system": show_system,
            },
        )
        provider = ProcessDataProvider()
        sink = select_sink(config.output, os.environ)
        greeting = name if name is not None else get_input("name", os.environ)
        run(provider, sink, config, name=greeting or None)
    except Exception as e:
        from envscope.cli.error_handler import handle_error

        handle_error(e, json_output=json_errors)

