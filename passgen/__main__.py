"""
CLI interface for passgen.
"""

import logging
import sys
from typing import Optional

import click
import pyperclip

from .charsets import CharacterClass
from .exceptions import ConfigurationError, LengthError
from .policy import PolicyBuilder
from .random_source import SeededRandomSource
from .utils.clipboard import DEFAULT_CLEAR_AFTER, copy_to_clipboard


def policy_options(func):
    """Attach the character class flags shared by every command."""
    options = [
        click.option("--no-upper-case", is_flag=True, help="Exclude upper-case letters"),
        click.option("--no-lower-case", is_flag=True, help="Exclude lower-case letters"),
        click.option("--no-digits", is_flag=True, help="Exclude digits"),
        click.option("--no-punctuation", is_flag=True, help="Exclude punctuation characters"),
        click.option("--require-upper-case", is_flag=True, help="Require at least one upper-case letter"),
        click.option("--require-lower-case", is_flag=True, help="Require at least one lower-case letter"),
        click.option("--require-digits", is_flag=True, help="Require at least one digit"),
        click.option("--require-punctuation", is_flag=True, help="Require at least one punctuation character"),
        click.option("--allow-ambiguous", is_flag=True, help="Allow ambiguous characters (O, 0, l, 1)"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def make_builder(no_upper_case: bool, no_lower_case: bool, no_digits: bool,
                 no_punctuation: bool, require_upper_case: bool, require_lower_case: bool,
                 require_digits: bool, require_punctuation: bool,
                 allow_ambiguous: bool) -> PolicyBuilder:
    """Translate command line flags into a policy builder."""
    return (PolicyBuilder()
            .set_allowed(CharacterClass.UPPER_CASE, not no_upper_case)
            .set_allowed(CharacterClass.LOWER_CASE, not no_lower_case)
            .set_allowed(CharacterClass.DIGIT, not no_digits)
            .set_allowed(CharacterClass.PUNCTUATION, not no_punctuation)
            .set_required(CharacterClass.UPPER_CASE, require_upper_case)
            .set_required(CharacterClass.LOWER_CASE, require_lower_case)
            .set_required(CharacterClass.DIGIT, require_digits)
            .set_required(CharacterClass.PUNCTUATION, require_punctuation)
            .set_ambiguous_allowed(allow_ambiguous))


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.version_option(package_name="passgen")
def cli(verbose: bool) -> None:
    """passgen - Generate random passwords from composition rules."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.option("--length", "-l", default=16, type=click.IntRange(1, 1024), help="Password length (1-1024, default: 16)")
@click.option("--count", "-n", default=1, type=click.IntRange(1, 100), help="Number of passwords (1-100, default: 1)")
@policy_options
@click.option("--copy", "-c", is_flag=True, help="Copy the password to the clipboard instead of printing it")
@click.option("--clear-after", default=DEFAULT_CLEAR_AFTER, type=click.IntRange(min=0),
              help=f"Seconds before the clipboard is cleared, 0 to keep (default: {DEFAULT_CLEAR_AFTER})")
@click.option("--seed", type=int, default=None, hidden=True, help="Seed a reproducible, insecure random source")
def generate(length: int, count: int, copy: bool, clear_after: int, seed: Optional[int],
             **flags: bool) -> None:
    """Generate one or more passwords."""
    if copy and count > 1:
        click.echo("Error: Cannot use --copy with --count greater than 1", err=True)
        sys.exit(1)

    builder = make_builder(**flags)
    if seed is not None:
        click.echo("Warning: seeded output is reproducible and must not be used for real secrets", err=True)
        builder.set_random_source(SeededRandomSource(seed))

    try:
        generator = builder.build()
        passwords = generator.generate_many(count, length)
    except (ConfigurationError, LengthError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if not copy:
        for password in passwords:
            click.echo(password)
        return

    value = passwords[0]
    try:
        clear_thread = copy_to_clipboard(value, clear_after)
    except pyperclip.PyperclipException as e:
        click.echo(f"Could not copy to clipboard: {e}", err=True)
        click.echo(value)
        return

    click.echo(f"🔐 Generated {length}-character password using: {generator.policy.describe()}")
    click.echo("🔐 Generated password copied to clipboard.")
    if clear_thread is not None:
        click.echo(f"Clipboard will be cleared in {clear_after} seconds (Ctrl+C to keep it).")
        clear_thread.join()


@cli.command()
@policy_options
def info(**flags: bool) -> None:
    """Show the character pool a set of flags would produce."""
    try:
        policy = make_builder(**flags).build_policy()
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo("Policy Information:")
    click.echo(f"  Classes: {policy.describe()}")
    click.echo(f"  Pool size: {len(policy.pool)} characters")
    click.echo(f"  Minimum length: {policy.minimum_length}")


def main() -> None:
    """Main entry point for the CLI application."""
    cli(auto_envvar_prefix="PASSGEN")


if __name__ == "__main__":
    main()
