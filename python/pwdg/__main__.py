"""
CLI interface for pwdg.
"""

import sys
import logging
import click
from typing import Optional

from . import __version__
from .charset import SPECIAL_CHARS
from .exceptions import PwdgException
from .generator import DEFAULT_OPTIONS as DEF, MIN_LENGTH, PwdGenOptions, generate_password

logger = logging.getLogger(__name__)

COUNT = click.IntRange(min=0)


def build_options(min_upper: int, min_lower: int, min_digit: int, min_special: int,
                  exclude: Optional[str], strong: bool) -> PwdGenOptions:
    """Map command line flags onto generator options."""
    if strong:
        return PwdGenOptions.strong(exclude=exclude)

    return PwdGenOptions(
        min_upper=min_upper,
        min_lower=min_lower,
        min_digit=min_digit,
        min_special=min_special,
        exclude=exclude,
    )


def copy_to_clipboard(password: str) -> None:
    """Copy the password to the clipboard, reporting problems on stderr."""
    try:
        import pyperclip
        pyperclip.copy(password)
        click.echo("Password copied to clipboard.", err=True)
    except ImportError:
        click.echo("pyperclip not installed. Install with: pip install pyperclip", err=True)
    except Exception as e:
        click.echo(f"Could not copy to clipboard: {e}", err=True)


@click.command(context_settings={"auto_envvar_prefix": "PWDG"})
@click.option("--length", "-l", default=MIN_LENGTH, type=COUNT, show_default=True,
              help=f"Length of the password. Must be at least {MIN_LENGTH}.")
@click.option("--min-upper", default=DEF.min_upper, type=COUNT,
              help="Minimum number of uppercase characters (A to Z).")
@click.option("--min-lower", default=DEF.min_lower, type=COUNT,
              help="Minimum number of lowercase characters (a to z).")
@click.option("--min-digit", default=DEF.min_digit, type=COUNT,
              help="Minimum number of digit characters (0 to 9).")
@click.option("--min-special", default=DEF.min_special, type=COUNT,
              help=f"Minimum number of special characters. Special characters: {SPECIAL_CHARS}")
@click.option("--exclude", "-e", default=None,
              help="Characters to exclude from the character set.")
@click.option("--strong", "-s", is_flag=True,
              help="At least 1 uppercase, 1 lowercase, 1 digit and 1 special character. "
                   "Overrides --min-upper, --min-lower, --min-digit and --min-special.")
@click.option("--copy", "-c", is_flag=True, help="Also copy the password to the clipboard")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.version_option(__version__, prog_name="pwdg")
def cli(length: int, min_upper: int, min_lower: int, min_digit: int, min_special: int,
        exclude: Optional[str], strong: bool, copy: bool, verbose: bool) -> None:
    """pwdg - Generate a random password."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    options = build_options(min_upper, min_lower, min_digit, min_special, exclude, strong)

    try:
        password = generate_password(length=length, options=options)
    except PwdgException as e:
        logger.debug(f"Password generation rejected: {type(e).__name__}")
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(password)

    if copy:
        copy_to_clipboard(password)


def main() -> None:
    """Main entry point for the CLI application."""
    cli()


if __name__ == "__main__":
    main()
