"""Command-line interface for GitDepend."""

import sys
import click

from gitdepend.config import get_config, update_config, DEFAULT_SETTINGS
from gitdepend.core import operations
from gitdepend.factory import create_services
from gitdepend.models.return_code import ReturnCode
from gitdepend.utils.console import _rich_echo, _rich_error, _rich_success
from gitdepend.version import get_version


def print_version(ctx, param, value):
    """Print version and exit."""
    if not value or ctx.resilient_parsing:
        return
    click.echo(f"GitDepend version {get_version()}")
    ctx.exit()


def _services():
    try:
        return create_services()
    except ValueError as e:
        _rich_error(str(e), symbol="error")
        sys.exit(ReturnCode.UNKNOWN_ERROR.exit_code)


def _exit(code):
    """Exit with a return code, explaining failures."""
    code = ReturnCode(code)
    if code != ReturnCode.SUCCESS:
        _rich_error(f"Failed: {code.describe()} ({int(code)})", symbol="error")
    sys.exit(code.exit_code)


directory_option = click.option(
    '--dir', 'directory', default='.', show_default=True,
    type=click.Path(file_okay=False),
    help="Root project directory")

dependency_option = click.option(
    '--dependency', '-d', 'dependencies', multiple=True,
    help="Only act on the named dependency (repeatable)")


@click.group(help="GitDepend: keep interdependent git checkouts built and their package references current")
@click.option('--version', is_flag=True, callback=print_version,
              expose_value=False, is_eager=True, help="Show version and exit")
def cli():
    """Main entry point for the GitDepend CLI."""
    pass


@cli.command(help="Rebuild dependencies and update projects to the new packages")
@directory_option
@dependency_option
def update(directory, dependencies):
    _exit(operations.update(directory, dependencies, _services()))


@cli.command(help="Check out the configured branch in every dependency")
@directory_option
@click.option('--create', is_flag=True, help="Create the configured branches")
def sync(directory, create):
    _exit(operations.sync(directory, create, _services()))


@cli.command(help="Show the git status of the project and its dependencies")
@directory_option
@dependency_option
def status(directory, dependencies):
    _exit(operations.status(directory, dependencies, _services()))


@cli.command(help="Remove untracked files from the project and its dependencies")
@directory_option
@dependency_option
@click.option('--dry-run', '-n', is_flag=True, help="Only show what would be removed")
@click.option('--force', '-f', is_flag=True, help="Actually remove the files")
@click.option('--args', 'git_arguments', multiple=True, help="Extra argument for git clean (repeatable)")
def clean(directory, dependencies, dry_run, force, git_arguments):
    arguments = []
    if dry_run:
        arguments.append('-n')
    if force:
        arguments.append('-f')
    arguments.extend(git_arguments)
    _exit(operations.clean(directory, arguments, dependencies, _services()))


@cli.command(name="list", help="List every dependency of the project")
@directory_option
@dependency_option
def list_command(directory, dependencies):
    _exit(operations.list_dependencies(directory, dependencies, _services()))


@cli.command(help="Create, delete or list branches across the project and its dependencies")
@click.argument('name', required=False)
@directory_option
@dependency_option
@click.option('--delete', is_flag=True, help="Delete the branch")
@click.option('--force', '-f', is_flag=True, help="Delete the branch even if it is not merged")
@click.option('--merged', is_flag=True, help="Only list merged branches")
def branch(name, directory, dependencies, delete, force, merged):
    if delete and not name:
        raise click.UsageError("A branch name is required with --delete")
    _exit(operations.branch(directory, name, delete, force, merged, dependencies, _services()))


@cli.command(help="Create a GitDepend.yml in a project")
@directory_option
@click.option('--name', help="Project name (defaults to the directory name)")
@click.option('--build-script', help="Build script, relative to the project")
@click.option('--build-args', help="Arguments passed to the build script")
@click.option('--packages-dir', help="Directory the build writes packages to")
@click.option('--force', '-f', is_flag=True, help="Overwrite an existing configuration")
def init(directory, name, build_script, build_args, packages_dir, force):
    _exit(operations.init_config(directory, name, build_script, build_args, packages_dir, force))


@cli.command(help="List the packages in the local artifact cache")
def cache():
    _exit(operations.list_cache(_services()))


@cli.group(name="config", help="Show project configuration and manage user settings")
def config_group():
    pass


@config_group.command(name="show", help="Show the GitDepend configuration of a project")
@directory_option
def config_show(directory):
    _exit(operations.show_config(directory, _services()))


@config_group.command(name="get", help="Show a user setting")
@click.argument('key')
def config_get(key):
    config = get_config()
    if key not in config:
        _rich_error(f"Unknown setting: {key}", symbol="error")
        sys.exit(ReturnCode.UNKNOWN_ERROR.exit_code)
    _rich_echo(f"{key}: {config[key]}")


@config_group.command(name="set", help="Change a user setting")
@click.argument('key', type=click.Choice(sorted(DEFAULT_SETTINGS)))
@click.argument('value')
def config_set(key, value):
    update_config({key: value})
    _rich_success(f"{key} set to {value}", symbol="success")


def main():
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
