"""
EntPass CLI
============

Click-based command-line interface for the EntPass password generator.

Usage::

    entpass generate                       # one 17-character password
    entpass generate -l 24 -q 5 -e 70      # five passwords scoring >= 70
    entpass generate -w -l 6 -E "|"        # six-word passphrase
    entpass --output json generate -e avg  # JSON record with sample stats
    entpass report -k 1000000 -c 8         # entropy statistics only
    entpass -o pw.txt generate -q 10       # ten passwords written to a file
    python -m entpass report -w

Option values fall back to the ``[generator]`` section of the configuration
file, then to built-in defaults.

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, NoReturn, Optional

import click
from pydantic import ValidationError
from rich.markup import escape

from shared.config import EntPassConfig
from shared.console import EntPassConsole
from shared.logger import EntPassLogger

from entpass import __version__
from entpass.analyzers.sampler import ProgressCallback
from entpass.core.engine import EntPassEngine
from entpass.core.errors import ConfigurationError, EntPassError
from entpass.core.models import (
    DEFAULT_CHAR_LENGTH,
    DEFAULT_WORD_COUNT,
    GenerationConfig,
)
from entpass.generators.wordlist import get_wordlist
from entpass.output.console import EntPassConsoleOutput
from entpass.output.report import (
    OUTPUT_FORMATS,
    ResultWriter,
    render_report,
    render_results,
)


# ===================================================================== #
#  Shared Generation Options
# ===================================================================== #

_GENERATION_OPTIONS = [
    click.option("-l", "--length", type=int, default=None,
                 help="Characters per password (words in word mode). "
                      "Default 17, or 5 with --words."),
    click.option("-q", "--quantity", type=int, default=None,
                 help="Number of distinct passwords to generate (max 433)."),
    click.option("-w", "--words", is_flag=True, default=False,
                 help="Use dictionary words joined by separators."),
    click.option("-s", "--symbols", "symbol_chars", default=None,
                 help="Acceptable symbols in new passwords."),
    click.option("-U", "--no-uppercase", is_flag=True, default=False,
                 help="Do not use uppercase characters."),
    click.option("-L", "--no-lowercase", is_flag=True, default=False,
                 help="Do not use lowercase characters."),
    click.option("-N", "--no-digits", is_flag=True, default=False,
                 help="Do not use digits."),
    click.option("-S", "--no-symbols", is_flag=True, default=False,
                 help="Do not use symbols."),
    click.option("-E", "--exclude", default=None,
                 help="Characters to exclude (a literal substring of the "
                      "separators in word mode)."),
    click.option("-W", "--separators", "word_separators", default=None,
                 help="Possible characters separating words."),
    click.option("-e", "--min-entropy", default=None,
                 help="Minimum entropy score to accept: a number, 'avg', "
                      "or a code such as n8/e5/s0."),
    click.option("-k", "--samples", "sample_size", type=int, default=None,
                 help="Candidates to score when computing entropy statistics."),
    click.option("-c", "--workers", type=int, default=None,
                 help="Worker threads for sampling (0 or less: all CPUs)."),
    click.option("--apply-codes", is_flag=True, default=False,
                 help="Use the value computed for a threshold code as the "
                      "minimum entropy."),
    click.option("--wordlist", type=click.Path(exists=True, dir_okay=False),
                 default=None, help="Newline-delimited word file."),
]


def generation_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the generation options shared by every subcommand."""
    for option in reversed(_GENERATION_OPTIONS):
        func = option(func)
    return func


def _build_settings(config: EntPassConfig, opts: dict[str, Any]) -> GenerationConfig:
    """Merge CLI options over the configured generator defaults.

    A worker count of zero or less selects the host's parallelism.

    Raises:
        ConfigurationError: If the merged settings are invalid.
    """
    gen = config.generator
    words = opts["words"] or gen.words

    length = opts["length"]
    if length is None:
        length = gen.length or (DEFAULT_WORD_COUNT if words else DEFAULT_CHAR_LENGTH)

    def pick(name: str, fallback: Any) -> Any:
        value = opts[name]
        return fallback if value is None else value

    workers = opts["workers"]
    if workers is not None and workers <= 0:
        workers = None

    try:
        return GenerationConfig(
            length=length,
            uppercase=not opts["no_uppercase"],
            lowercase=not opts["no_lowercase"],
            digits=not opts["no_digits"],
            symbols=not opts["no_symbols"],
            symbol_chars=pick("symbol_chars", gen.symbols),
            exclude=pick("exclude", gen.exclude),
            words=words,
            word_separators=pick("word_separators", gen.word_separators),
            quantity=pick("quantity", gen.quantity),
            min_entropy=pick("min_entropy", gen.min_entropy),
            sample_size=pick("sample_size", gen.sample_size),
            workers=workers,
            apply_threshold_codes=opts["apply_codes"] or gen.apply_threshold_codes,
        )
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(map(str, err['loc'])) or 'settings'}: {err['msg']}"
            for err in exc.errors()
        )
        raise ConfigurationError(f"Invalid settings: {problems}") from exc


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to EntPass configuration file (TOML).",
)
@click.option(
    "--output",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default="text",
    help="Output format.",
)
@click.option(
    "--output-file", "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write results to this file instead of stdout.",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Override the configured log level.",
)
@click.option(
    "--quiet",
    is_flag=True,
    default=False,
    help="Suppress progress bars and informational output.",
)
@click.version_option(__version__, prog_name="entpass")
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output_format: str,
    output_file: Optional[str],
    log_level: Optional[str],
    quiet: bool,
) -> None:
    """EntPass -- entropy-gated password generator.

    Generate passwords or passphrases whose length-scaled Shannon entropy
    meets a minimum, or report entropy statistics for a set of options.
    """
    ctx.ensure_object(dict)

    entpass_config = EntPassConfig.load(config) if config else EntPassConfig()
    if log_level:
        entpass_config.global_settings.log_level = log_level.upper()

    ctx.obj["config"] = entpass_config
    ctx.obj["output_format"] = output_format
    ctx.obj["writer"] = ResultWriter(Path(output_file) if output_file else None)
    ctx.obj["quiet"] = quiet
    ctx.obj["console"] = EntPassConsole(quiet=quiet)
    gs = entpass_config.global_settings
    ctx.obj["logger"] = EntPassLogger(
        "cli",
        log_level="DEBUG" if gs.debug else gs.log_level,
        log_file=gs.log_file or None,
        json_logs=gs.log_json,
        console_output=False,
    )


def _make_engine(ctx: click.Context, wordlist: Optional[str]) -> EntPassEngine:
    config: EntPassConfig = ctx.obj["config"]
    source = wordlist or config.generator.wordlist_path or None
    return EntPassEngine(config, wordlist=get_wordlist(source))


def _run_with_progress(
    ctx: click.Context,
    settings: GenerationConfig,
    needs_sampling: bool,
    action: Callable[[Optional[ProgressCallback]], Any],
) -> Any:
    """Run *action*, showing a progress bar on stderr while sampling."""
    console: EntPassConsole = ctx.obj["console"]
    if ctx.obj["quiet"] or not needs_sampling:
        return action(None)
    with console.progress("Calculating ...", total=settings.sample_size) as (bar, task):
        return action(lambda advance: bar.update(task, advance=advance))


def _fail(ctx: click.Context, exc: EntPassError) -> NoReturn:
    """Log an EntPass error, show it on stderr and exit with status 1."""
    ctx.obj["logger"].error("%s", exc)
    EntPassConsole().error(escape(str(exc)))
    ctx.exit(1)


def _deliver(ctx: click.Context, document: str) -> None:
    writer: ResultWriter = ctx.obj["writer"]
    path = writer.write(document)
    if path is not None:
        ctx.obj["console"].success(f"Output written to: {path}")


# ===================================================================== #
#  Subcommands
# ===================================================================== #

@cli.command()
@generation_options
@click.pass_context
def generate(ctx: click.Context, wordlist: Optional[str], **opts: Any) -> None:
    """Generate passwords meeting the minimum entropy.

    With the default threshold 'avg' the options are first sampled
    (see --samples) and the sample average becomes the minimum.
    """
    try:
        settings = _build_settings(ctx.obj["config"], opts)
        engine = _make_engine(ctx, wordlist)
        results = _run_with_progress(
            ctx,
            settings,
            settings.uses_average,
            lambda progress: engine.generate(settings, progress),
        )
    except EntPassError as exc:
        _fail(ctx, exc)

    _deliver(ctx, render_results(results, ctx.obj["output_format"]))


@cli.command()
@generation_options
@click.pass_context
def report(ctx: click.Context, wordlist: Optional[str], **opts: Any) -> None:
    """Report average, minimum, maximum and recommended entropy.

    Scores --samples candidates generated with the given options across
    the worker pool without printing any password.
    """
    try:
        settings = _build_settings(ctx.obj["config"], opts)
        engine = _make_engine(ctx, wordlist)
        record = _run_with_progress(
            ctx,
            settings,
            True,
            lambda progress: engine.report(settings, progress),
        )
    except EntPassError as exc:
        _fail(ctx, exc)

    output_format = ctx.obj["output_format"]
    writer: ResultWriter = ctx.obj["writer"]
    if output_format == "text" and not writer.to_file:
        display = EntPassConsoleOutput(EntPassConsole(stderr=False))
        if display.console.is_terminal:
            display.display_report(record)
            return
    _deliver(ctx, render_report(record, output_format))


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the EntPass CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
