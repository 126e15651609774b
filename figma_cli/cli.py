"""Command line entry point for the figma tool."""

import logging

import click

from figma_cli import __version__
from figma_cli.config import get_settings
from figma_cli.services.commands import (
    copy_figma_node,
    execute_with_error_handling,
    export_figma_node,
    report_error_and_exit,
    show_figma_node_url,
)


@click.group(name="figma")
@click.version_option(__version__, prog_name="figma")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool):
    """Figma CLI tool"""
    ctx.ensure_object(dict)
    try:
        level = "DEBUG" if verbose else get_settings().log_level
        logging.basicConfig(
            level=level,
            format="[%(asctime)s] [%(name)s] [%(levelname)s] %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    except ValueError as e:
        report_error_and_exit(e)


@cli.group()
def node():
    """Node operations"""


@node.command("copy")
@click.argument("url")
@click.option("--output", "-o", "output", default=None, help="Output directory path")
@click.pass_obj
def copy_command(obj: dict, url: str, output: str):
    """Copy a Figma node as an image to clipboard"""
    execute_with_error_handling(
        copy_figma_node(
            url,
            output,
            transport=obj.get("transport"),
            clipboard=obj.get("clipboard"),
        )
    )


@node.command("url")
@click.argument("url")
@click.pass_obj
def url_command(obj: dict, url: str):
    """Show the image URL from Figma API"""
    execute_with_error_handling(show_figma_node_url(url, transport=obj.get("transport")))


@node.command("export")
@click.argument("url")
@click.option("--output", "-o", "output", default=None, help="Output directory path")
@click.pass_obj
def export_command(obj: dict, url: str, output: str):
    """Download a Figma node as an image to a directory"""
    execute_with_error_handling(
        export_figma_node(url, output, transport=obj.get("transport"))
    )


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
