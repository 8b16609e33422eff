"""Typer-based pattern checker: try a pattern against a command line.

Usage:
    python -m parseman '(-i\\s*)(\\d+)' --type int -- test -i 90
"""

from enum import Enum
from typing import List, Optional

import typer

from parseman.config import LoggingConfig, ParserConfig
from parseman.errors import ParsemanError, PatternSyntaxError
from parseman.logger import get_logger, setup_logger
from parseman.parser import Parser

logger = get_logger("parseman.cli")
app = typer.Typer(add_completion=False)

CHECK = "check"


class ValueTypeName(str, Enum):
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STR = "str"


VALUE_TYPES = {
    ValueTypeName.BOOL: bool,
    ValueTypeName.INT: int,
    ValueTypeName.FLOAT: float,
    ValueTypeName.STR: str,
}


@app.command()
def check(
    pattern: str = typer.Argument(..., help="Regular expression searched in the command line."),
    args: Optional[List[str]] = typer.Argument(None, help="Argument tokens (put them after --)."),
    value_type: ValueTypeName = typer.Option(ValueTypeName.STR, "--type", "-t", help="Type to convert the submatch to."),
    submatch: Optional[int] = typer.Option(None, "--submatch", "-s", help="Submatch to convert (default 2)."),
    all_groups: bool = typer.Option(False, "--all-groups", "-a", help="Print every group of the match instead."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log parser activity to stderr."),
) -> None:
    log_config = LoggingConfig.from_env()
    if verbose:
        log_config.log_level = "DEBUG"
        log_config.console_output = True
    if verbose or log_config.log_file:
        setup_logger(
            log_level=log_config.log_level,
            console_output=log_config.console_output,
            log_file=log_config.log_file,
        )

    parser = Parser(args or [], config=ParserConfig.from_env())
    target = VALUE_TYPES[value_type]

    try:
        parser.register(CHECK, pattern, target)
    except PatternSyntaxError as e:
        logger.error(f"Pattern rejected: {e}")
        typer.echo(f"❌ {e}", err=True)
        raise typer.Exit(code=2)

    typer.echo(f"Command line: {parser.cmdline!r}")

    if all_groups:
        groups = parser.groups(CHECK)
        if not groups:
            typer.echo("No match.")
            return
        for index, text in enumerate(groups):
            typer.echo(f"  [{index}] {text!r}")
        return

    try:
        value = parser.get(CHECK, target, submatch)
    except ParsemanError as e:
        logger.error(f"Retrieval failed: {e}")
        typer.echo(f"❌ {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Value: {value!r}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
