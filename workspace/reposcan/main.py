#!/usr/bin/env python3
"""
RepoScanner - Main Entry Point
Recurses through directories and prints the sync status of every git repository found.
"""
import os
import sys

import click
from colorama import init, Fore, Style

from . import __version__
from .config import Config
from .errors import TraversalError
from .reporter import ReportGenerator
from .scanner import RepoScanner
from .utils import validate_path

# Initialize colorama for cross-platform colored output
init()


@click.command(context_settings={'help_option_names': ['-h', '-help', '--help']})
@click.argument('path', default='.', type=str)
@click.option('--format', '-f', 'report_format',
              type=click.Choice(['text', 'json', 'markdown'], case_sensitive=False),
              default='text',
              help='Report format')
@click.option('--threads', '-t', 'threads',
              help='Number of repositories inspected in parallel',
              default=1,
              type=click.IntRange(min=1))
@click.option('--verbose', '-v',
              is_flag=True,
              help='Print scan progress and the cause of every Error result to stderr')
@click.option('--progress',
              is_flag=True,
              help='Show a progress bar while inspecting repositories')
@click.option('--no-color', 'no_color',
              is_flag=True,
              help='Disable colored output')
@click.version_option(__version__, '--version', prog_name='repo-scanner')
def main(path, report_format, threads, verbose, progress, no_color):
    """
    Recurse through PATH (default: current directory) and output the status of any git repos.

    Each line reads "<path>: <status>" where status is one of Synced, Not Synced,
    No Remote, No Commits, Error or No Repo.
    """
    abs_path = os.path.abspath(path)
    if not validate_path(abs_path):
        click.echo(f"{Fore.RED}❌ Error: Path '{path}' does not exist or is not a directory!{Style.RESET_ALL}",
                   err=True)
        sys.exit(1)

    config = Config(
        scan_path=abs_path,
        report_format=report_format.lower(),
        num_threads=threads,
        verbose=verbose,
        show_progress=progress,
        color=not no_color,
    )

    try:
        results = RepoScanner(config).scan()
        report = ReportGenerator(config).generate_report(results)
    except TraversalError as e:
        click.echo(f"{Fore.RED}❌ Error: {e}{Style.RESET_ALL}", err=True)
        sys.exit(1)
    except KeyboardInterrupt:
        click.echo(f"\n{Fore.YELLOW}⏹️  Scan interrupted by user.{Style.RESET_ALL}", err=True)
        sys.exit(1)
    except Exception as e:
        click.echo(f"{Fore.RED}❌ Error during scan: {str(e)}{Style.RESET_ALL}", err=True)
        sys.exit(1)

    if report:
        click.echo(report)


if __name__ == "__main__":
    main()
