import logging
import time
from concurrent.futures import ThreadPoolExecutor

import click

from . import __version__
from .compute import calculate_pi, new_pi
from .errors import PicalcError
from .output import format_digits, write_digits_to_file
from .parallel import DEFAULT_THRESHOLD
from .reducer import METHODS
from .verify import verify_digits


PREVIEW_DIGITS = 100
POLL_INTERVAL = 0.1


def _configure_logging(verbose: int):
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def _run(digits: int, workers, threshold: int, method: str, show_progress: bool):
    pi = new_pi(digits)
    with ThreadPoolExecutor(max_workers=1, thread_name_prefix="picalc-compute") as ex:
        fut = ex.submit(calculate_pi, digits, pi, workers, threshold, method)
        if show_progress:
            shown = 0
            with click.progressbar(length=max(digits, 1), label="Computing") as bar:
                while not fut.done():
                    target = int(digits * pi.get_progress() / 100.0)
                    if target > shown:
                        bar.update(target - shown)
                        shown = target
                    time.sleep(POLL_INTERVAL)
                fut.result()
                bar.update(max(digits, 1) - shown)
        fut.result()
    return pi


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, prog_name="picalc")
@click.option("-v", "--verbose", count=True, help="Repeat for more logging.")
def main(verbose: int):
    _configure_logging(verbose)


@main.command()
@click.argument("digits", type=int)
@click.option("-o", "--output", "output", default="", help="Save digits to file")
@click.option("-p", "--progress/--no-progress", default=True, show_default=True, help="Show progress bar")
@click.option("--workers", default=None, type=int, help="Worker threads [default: CPU count]")
@click.option("--threshold", default=DEFAULT_THRESHOLD, show_default=True, type=int)
@click.option("--method", type=click.Choice(METHODS, case_sensitive=False), default="float", show_default=True)
@click.option("--verify/--no-verify", default=False, show_default=True)
@click.option("--verify-samples", default=1000, show_default=True, type=int)
def calculate(
    digits: int,
    output: str,
    progress: bool,
    workers,
    threshold: int,
    method: str,
    verify: bool,
    verify_samples: int,
):
    """Calculate π to DIGITS decimal digits."""
    if workers is not None and workers < 1:
        raise click.ClickException("--workers must be >= 1")
    if threshold < 1:
        raise click.ClickException("--threshold must be >= 1")
    click.echo(f"Calculating π to {digits} decimal digits...")
    started = time.monotonic()
    try:
        pi = _run(digits, workers, threshold, method.lower(), progress)
    except PicalcError as exc:
        raise click.ClickException(str(exc))
    elapsed = time.monotonic() - started
    click.echo(f"\nCalculation completed in {elapsed:.3f}s")
    result = pi.get_digits(digits + 1)
    if verify:
        ok, checked = verify_digits(result, verify_samples)
        if not ok:
            raise click.ClickException(f"verification failed in the first {checked} digits")
        click.echo(f"Verified {checked} digits")
    if output:
        try:
            write_digits_to_file(result, output)
        except PicalcError as exc:
            raise click.ClickException(str(exc))
        click.echo(f"Results saved to {output}")
        return
    preview = format_digits(result[: PREVIEW_DIGITS + 1])
    suffix = "..." if len(result) - 1 > PREVIEW_DIGITS else ""
    click.echo(f"π = {preview}{suffix}")
    click.echo("Use --output flag to save all digits to a file")
