# ariohash/cli.py
import dataclasses
import json
from typing import Optional

import typer
from loguru import logger

from .services.logging import setup_logging
from .config.loader import get_config, save_config
from .config.paths import get_user_config_file
from .config.schema import HashSettings
from .core.errors import AriohashError, InvalidOptions
from .core.models import HashOptions, HashResult
from .core.search import ProofOfWorkSearch, run_with_timeout
from . import __version__

app = typer.Typer(help="ArioHash CLI - keyed, reproducible digests with optional proof-of-work search.")

def version_callback(value: bool):
    if value:
        print(f"ariohash {__version__}")
        raise typer.Exit()

@app.callback()
def main_options(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    log_file: bool = typer.Option(True, "--log-file/--no-log-file", help="Also write logs to the user log directory."),
    version: Optional[bool] = typer.Option(None, "--version", callback=version_callback, is_eager=True, help="Show version and exit."),
):
    """ Main callback to set up logging """
    # Logging comes up before the config load so load errors reach stderr.
    setup_logging(level="INFO", verbose=verbose, log_to_file=log_file)
    settings = get_config()
    if not verbose and settings.log_level != "INFO":
        setup_logging(level=settings.log_level, verbose=verbose, log_to_file=log_file)
    ctx.ensure_object(dict)
    ctx.obj["VERBOSE"] = verbose


def _build_options(
    settings: HashSettings,
    text: Optional[str],
    salt: Optional[int],
    length: Optional[int],
    charset: Optional[str],
    pattern: Optional[str],
    key: Optional[int],
    max_iterations: Optional[int],
) -> HashOptions:
    """Command-line values win over configured defaults."""
    return HashOptions(
        input=text or "",
        salt=settings.salt if salt is None else salt,
        output_length=settings.output_length if length is None else length,
        character_set=settings.character_set if charset is None else charset,
        pattern=pattern,
        proof_of_work_key=settings.proof_of_work_key if key is None else key,
        max_iterations=settings.max_iterations if max_iterations is None else max_iterations,
    )


def _run_search(options: HashOptions, timeout: Optional[float]) -> HashResult:
    settings = get_config()
    try:
        search = ProofOfWorkSearch(options, progress_interval=settings.progress_interval)
        return run_with_timeout(search, timeout)
    except InvalidOptions as e:
        typer.echo(f"Invalid options: {e}", err=True)
        raise typer.Exit(code=1)
    except AriohashError as e:
        logger.error(f"Search failed: {e}")
        typer.echo(f"Search failed: {e}", err=True)
        raise typer.Exit(code=1)


@app.command("hash")
def hash_text(
    text: Optional[str] = typer.Argument(None, help="Text to hash. Omit to hash the current timestamp."),
    salt: Optional[int] = typer.Option(None, "--salt", "-s", min=0, help="Unsigned 32-bit salt."),
    length: Optional[int] = typer.Option(None, "--length", "-l", help="Output length in characters."),
    charset: Optional[str] = typer.Option(None, "--charset", "-c", help="Output alphabet."),
    pattern: Optional[str] = typer.Option(None, "--pattern", "-p", help="Regular expression the hash must contain (use ^ to anchor)."),
    key: Optional[int] = typer.Option(None, "--key", "-k", min=0, help="Starting proof-of-work key."),
    max_iterations: Optional[int] = typer.Option(None, "--max-iterations", help="Give up after this many candidates."),
    timeout: Optional[float] = typer.Option(None, "--timeout", "-t", min=0.0, help="Give up after this many seconds."),
    json_output: bool = typer.Option(False, "--json", help="Print the result as JSON."),
):
    """
    Computes a hash, searching proof-of-work keys until it matches --pattern.
    """
    options = _build_options(get_config(), text, salt, length, charset, pattern, key, max_iterations)
    result = _run_search(options, timeout)

    if json_output:
        typer.echo(json.dumps(dataclasses.asdict(result), ensure_ascii=False))
    else:
        typer.echo(result.hash)
        typer.echo(f"proof_of_work_index: {result.proof_of_work_index}")
        logger.debug(f"Search took {result.iterations} iteration(s).")


@app.command()
def verify(
    text: str = typer.Argument(..., help="Text that was hashed."),
    expected: str = typer.Argument(..., help="Hash to check."),
    index: Optional[int] = typer.Option(None, "--index", "-i", min=0, help="Expected proof-of-work index."),
    salt: Optional[int] = typer.Option(None, "--salt", "-s", min=0, help="Unsigned 32-bit salt."),
    charset: Optional[str] = typer.Option(None, "--charset", "-c", help="Output alphabet."),
    pattern: Optional[str] = typer.Option(None, "--pattern", "-p", help="Regular expression the hash must contain (use ^ to anchor)."),
    key: Optional[int] = typer.Option(None, "--key", "-k", min=0, help="Starting proof-of-work key."),
    max_iterations: Optional[int] = typer.Option(None, "--max-iterations", help="Give up after this many candidates."),
    timeout: Optional[float] = typer.Option(None, "--timeout", "-t", min=0.0, help="Give up after this many seconds."),
):
    """
    Re-runs the search from the starting key and checks the hash (and index).

    The output length is taken from the expected hash.
    """
    if not text:
        typer.echo("Verification needs explicit text; the timestamp default is not reproducible.", err=True)
        raise typer.Exit(code=1)
    options = _build_options(get_config(), text, salt, len(expected), charset, pattern, key, max_iterations)
    result = _run_search(options, timeout)

    hash_ok = result.hash == expected
    index_ok = index is None or result.proof_of_work_index == index
    if hash_ok and index_ok:
        logger.success("Hash verified.")
        typer.echo("OK")
        return

    logger.warning(f"Verification failed for input of length {len(text)}.")
    typer.echo("MISMATCH")
    if not hash_ok:
        typer.echo(f"expected hash: {expected}")
        typer.echo(f"computed hash: {result.hash}")
    if not index_ok:
        typer.echo(f"expected index: {index}")
        typer.echo(f"computed index: {result.proof_of_work_index}")
    raise typer.Exit(code=1)


@app.command("config")
def config_command(
    init: bool = typer.Option(False, "--init", help="Write a config file with the default settings."),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing config file with --init."),
):
    """
    Shows the config file location and effective settings.
    """
    config_path = get_user_config_file()
    if init:
        if config_path.exists() and not force:
            typer.echo(f"Config file already exists: {config_path} (use --force to overwrite)", err=True)
            raise typer.Exit(code=1)
        try:
            written = save_config(HashSettings())
        except OSError as e:
            logger.error(f"Could not write config file: {e}")
            typer.echo(f"Could not write config file: {e}", err=True)
            raise typer.Exit(code=1)
        typer.echo(f"Wrote default configuration to {written}")
        return

    status = "exists" if config_path.exists() else "not found, using defaults"
    typer.echo(f"config file: {config_path} ({status})")
    typer.echo(get_config().model_dump_json(indent=4))


if __name__ == "__main__":
    app()
