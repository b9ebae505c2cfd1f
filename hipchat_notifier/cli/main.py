"""
HipChat Notifier CLI

Post-build entry point for CI hosts.

Usage:
    hipchat-notify [OPTIONS] COMMAND [ARGS]...

Commands:
    send      Notify the room about a completed build
    config    Show the global chat service settings
"""

import logging
import os
import sys
from pathlib import Path

import click
from dotenv import load_dotenv

from ..config import (
    DEFAULT_MESSAGE_FORMAT,
    MESSAGE_FORMATS,
    FromFile,
    GlobalConfig,
    NotifierConfig,
    Template,
)
from ..notifier import HipChatNotifier
from ..types import BuildContext, BuildLog, BuildResult

# Load .env file
load_dotenv()

RESULT_CHOICES = [r.name for r in BuildResult]


def setup_logging(verbose: bool):
    """Configure logging to output to stderr."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(message)s',  # Simple format for CLI
        handlers=[logging.StreamHandler(sys.stderr)]
    )


@click.group()
@click.option('-v', '--verbose', is_flag=True, help='Verbose output (show DEBUG logs)')
@click.option('-q', '--quiet', is_flag=True, help='Quiet mode (only show warnings/errors)')
@click.pass_context
def cli(ctx, verbose, quiet):
    """HipChat build notifier."""
    if quiet:
        logging.basicConfig(level=logging.WARNING, format='%(message)s')
    else:
        setup_logging(verbose)

    ctx.ensure_object(dict)
    ctx.obj['global_config'] = GlobalConfig.from_env()


@cli.command()
@click.option('--job-name', required=True, help='Name of the job')
@click.option('--build-number', required=True, type=int, help='Build number')
@click.option('--result', required=True, type=click.Choice(RESULT_CHOICES, case_sensitive=False),
              help='Build result')
@click.option('--url', default='', help='Build URL')
@click.option('--workspace', default='.', type=click.Path(file_okay=False, path_type=Path),
              help='Build workspace root')
@click.option('--room', default=None, help='Room (defaults to HIPCHAT_ROOM)')
@click.option('--token', default=None, help='API token (defaults to HIPCHAT_TOKEN)')
@click.option('--success-format', default=DEFAULT_MESSAGE_FORMAT, show_default=True,
              help='Message template for successful builds')
@click.option('--failure-format', default=DEFAULT_MESSAGE_FORMAT, show_default=True,
              help='Message template for unsuccessful builds')
@click.option('--post-success/--no-post-success', default=True, help='Post successful builds')
@click.option('--notify-success/--no-notify-success', default=True, help='Alert the room on success')
@click.option('--post-failed/--no-post-failed', default=True, help='Post unsuccessful builds')
@click.option('--notify-failed/--no-notify-failed', default=True, help='Alert the room on failure')
@click.option('--message-file', default=None,
              help='Read the message from this file (relative to the workspace)')
@click.option('--message-format', default='text', show_default=True, type=click.Choice(MESSAGE_FORMATS),
              help='How the chat service renders the message')
@click.pass_context
def send(ctx, job_name, build_number, result, url, workspace, room, token,
         success_format, failure_format, post_success, notify_success,
         post_failed, notify_failed, message_file, message_format):
    """Notify the room about a completed build."""
    message_source = FromFile(message_file) if message_file is not None else Template()
    config = NotifierConfig(
        room=room,
        token=token,
        success_template=success_format,
        failure_template=failure_format,
        post_on_success=post_success,
        notify_on_success=notify_success,
        post_on_failure=post_failed,
        notify_on_failure=notify_failed,
        message_source=message_source,
        message_format=message_format,
    )
    build = BuildContext(
        job_name=job_name,
        build_number=build_number,
        result=BuildResult.parse(result),
        url=url,
        workspace=workspace,
        env=dict(os.environ),
    )

    build_log = BuildLog()
    HipChatNotifier(config).perform(build, ctx.obj['global_config'], build_log)

    for line in build_log.lines:
        click.echo(line)


@cli.command()
@click.pass_context
def config(ctx):
    """Show the global chat service settings."""
    global_config = ctx.obj['global_config']
    click.echo(f"{'Server':<8} {global_config.server or click.style('(unset)', fg='yellow')}")
    click.echo(f"{'Token':<8} {global_config.masked_token or click.style('(unset)', fg='yellow')}")
    click.echo(f"{'Room':<8} {global_config.room or click.style('(unset)', fg='yellow')}")


if __name__ == '__main__':
    cli()
