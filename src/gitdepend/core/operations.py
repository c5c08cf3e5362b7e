"""Core operations for GitDepend, one per command."""

import os
from pathlib import Path
from typing import Callable, Iterable, Optional, Sequence

from ..deps.traversal import DependencyVisitorAlgorithm
from ..factory import Services
from ..models.gitdepend_file import (
    BuildSettings, CONFIG_FILE_NAMES, GitDependFile, PackageSettings
)
from ..models.return_code import ReturnCode
from ..utils.console import (
    _create_table, _print_table, _rich_banner, _rich_echo, _rich_error,
    _rich_info, _rich_panel, _rich_success, _rich_warning
)
from ..visitors import (
    BuildAndUpdateDependenciesVisitor, CheckOutBranchVisitor, CleanVisitor,
    CreateBranchVisitor, DeleteBranchVisitor, DisplayStatusVisitor,
    ListAllDependenciesVisitor, ListBranchesVisitor, Visitor
)


def _whitelisted(name: str, whitelist: Optional[Iterable[str]]) -> bool:
    names = [entry.casefold() for entry in (whitelist or []) if entry]
    return not names or name.casefold() in names


def _run_on_root(services: Services, directory: str, whitelist: Optional[Iterable[str]],
                 action: Callable[[str], ReturnCode]) -> ReturnCode:
    """Run an action in the root project when its name passes the whitelist."""
    config, root, code = services.loader.load_from_directory(directory)
    if code != ReturnCode.SUCCESS:
        return code
    if not _whitelisted(config.name, whitelist):
        return ReturnCode.SUCCESS

    services.git.working_directory = root
    return action(root)


def _traverse(visitor: Visitor, directory: str, services: Services,
              algorithm: Optional[DependencyVisitorAlgorithm] = None) -> ReturnCode:
    algorithm = algorithm or services.create_algorithm()
    return algorithm.traverse_dependencies(visitor, directory)


def update(directory: str, dependencies: Sequence[str], services: Services) -> ReturnCode:
    """Rebuild dependencies and update every project to consume the new packages.

    Runs three passes over the graph: branch checkout, name collection and
    build/update. A pass only starts if the previous one succeeded.

    Args:
        directory: Root project directory
        dependencies: Names of the dependencies to rebuild; all of them when empty
        services: Collaborators to use

    Returns:
        ReturnCode: Status of the first failing pass, or SUCCESS
    """
    algorithm = services.create_algorithm()

    checkout = CheckOutBranchVisitor(services.git)
    algorithm.traverse_dependencies(checkout, directory)
    if checkout.return_code != ReturnCode.SUCCESS:
        _rich_error("Could not ensure the correct branch on all dependencies.", symbol="error")
        return checkout.return_code

    algorithm.reset()
    lister = ListAllDependenciesVisitor()
    code = algorithm.traverse_dependencies(lister, directory)
    if code != ReturnCode.SUCCESS:
        return code

    root_config, _, code = services.loader.load_from_directory(directory)
    if code != ReturnCode.SUCCESS:
        return code

    algorithm.reset()
    visitor = BuildAndUpdateDependenciesVisitor(
        dependencies_to_build=list(dependencies) or lister.names,
        projects_to_update=lister.names + [root_config.name],
        loader=services.loader,
        git=services.git,
        package_manager=services.package_manager,
        process_runner=services.process_runner,
        cache=services.cache,
    )
    algorithm.traverse_dependencies(visitor, directory)

    if visitor.return_code == ReturnCode.SUCCESS:
        for package in sorted(visitor.updated_packages):
            _rich_info(f"Updated {package}", symbol="package")
        _rich_success("Update complete!", symbol="success")
    return visitor.return_code


def sync(directory: str, create: bool, services: Services) -> ReturnCode:
    """Put every dependency on its declared branch, cloning missing ones."""
    visitor = CheckOutBranchVisitor(services.git, create=create)
    code = _traverse(visitor, directory, services)
    if code == ReturnCode.SUCCESS:
        _rich_success("All dependencies are on their configured branch.", symbol="check")
    else:
        _rich_error("Could not ensure the correct branch on all dependencies.", symbol="error")
    return code


def status(directory: str, whitelist: Optional[Sequence[str]], services: Services) -> ReturnCode:
    """Display the git status of the root project and its dependencies.

    The root project is always shown; the whitelist only filters dependencies.
    """
    config, root, code = services.loader.load_from_directory(directory)
    if code != ReturnCode.SUCCESS:
        return code

    _rich_banner()
    _rich_echo(f"Status of {root}", bold=True)
    services.git.working_directory = root
    code = services.git.status()
    if code != ReturnCode.SUCCESS:
        return code

    return _traverse(DisplayStatusVisitor(services.git, whitelist), directory, services)


def clean(directory: str, arguments: Sequence[str], whitelist: Optional[Sequence[str]],
          services: Services) -> ReturnCode:
    """Run git clean in the root project and its dependencies."""
    def clean_root(root):
        _rich_info(f"Cleaning {root}", symbol="gear")
        return services.git.clean(*arguments)

    code = _run_on_root(services, directory, whitelist, clean_root)
    if code != ReturnCode.SUCCESS:
        return code

    return _traverse(CleanVisitor(services.git, arguments, whitelist), directory, services)


def branch(directory: str, name: Optional[str], delete: bool, force: bool, merged: bool,
           whitelist: Optional[Sequence[str]], services: Services) -> ReturnCode:
    """Create, delete or list branches in the root project and its dependencies.

    Without a branch name the branches are listed.
    """
    git = services.git
    if not name:
        visitor = ListBranchesVisitor(git, merged=merged, whitelist=whitelist)

        def root_action(root):
            _rich_echo(root, bold=True)
            return git.list_merged_branches() if merged else git.list_all_branches()
    elif delete:
        visitor = DeleteBranchVisitor(git, name, force=force, whitelist=whitelist)

        def root_action(root):
            _rich_info(f"Deleting branch {name} in {root}", symbol="branch")
            return git.delete_branch(name, force)
    else:
        visitor = CreateBranchVisitor(git, name, whitelist=whitelist)

        def root_action(root):
            _rich_info(f"Creating branch {name} in {root}", symbol="branch")
            return git.create_branch(name)

    code = _run_on_root(services, directory, whitelist, root_action)
    if code != ReturnCode.SUCCESS:
        return code

    return _traverse(visitor, directory, services)


def list_dependencies(directory: str, whitelist: Optional[Sequence[str]], services: Services) -> ReturnCode:
    """Display every dependency of the root project, in traversal order."""
    visitor = ListAllDependenciesVisitor(whitelist)
    code = _traverse(visitor, directory, services)
    if code != ReturnCode.SUCCESS:
        return code

    if not visitor.dependencies:
        _rich_info("No dependencies found", symbol="info")
        return code

    _print_table(_create_table("Dependencies", ["Name", "Directory"], visitor.dependencies))
    return code


def show_config(directory: str, services: Services) -> ReturnCode:
    """Display the GitDepend configuration of a project."""
    config, root, code = services.loader.load_from_directory(directory)
    if code != ReturnCode.SUCCESS:
        return code

    config_file = GitDependFile.find_config_file(Path(root))
    title = str(config_file) if config_file else f"{root} (defaults)"
    _rich_panel(config.to_yaml().rstrip(), title=title)
    return code


def init_config(directory: str, name: Optional[str] = None, script: Optional[str] = None,
                arguments: Optional[str] = None, packages_dir: Optional[str] = None,
                force: bool = False) -> ReturnCode:
    """Write a GitDepend.yml with the given settings into a directory.

    Returns:
        ReturnCode: DIRECTORY_DOES_NOT_EXIST if the directory is missing, else SUCCESS
    """
    if not os.path.isdir(directory):
        _rich_error(f"Directory not found: {directory}", symbol="error")
        return ReturnCode.DIRECTORY_DOES_NOT_EXIST

    project_dir = Path(directory)
    existing = GitDependFile.find_config_file(project_dir)
    if existing and not force:
        _rich_warning(f"{existing} already exists, use --force to overwrite it", symbol="warning")
        return ReturnCode.SUCCESS

    defaults = GitDependFile.default(project_dir)
    config = GitDependFile(
        name=name or defaults.name,
        build=BuildSettings(
            script=script or defaults.build.script,
            arguments=arguments or defaults.build.arguments,
        ),
        packages=PackageSettings(directory=packages_dir or defaults.packages.directory),
    )

    config_file = existing or project_dir / CONFIG_FILE_NAMES[0]
    with open(config_file, "w", encoding="utf-8") as f:
        f.write(config.to_yaml())

    _rich_success(f"Created {config_file}", symbol="success")
    return ReturnCode.SUCCESS


def list_cache(services: Services) -> ReturnCode:
    """Display the packages stored in the local artifact cache."""
    cache_dir = services.cache.get_cache_directory()
    if not cache_dir:
        return ReturnCode.COULD_NOT_CREATE_CACHE_DIRECTORY

    packages = services.cache.list_packages(services.package_manager.package_pattern)
    if not packages:
        _rich_info(f"No packages cached in {cache_dir}", symbol="info")
        return ReturnCode.SUCCESS

    _print_table(_create_table(f"Cached packages ({cache_dir})", ["Package"], [(p,) for p in packages]))
    return ReturnCode.SUCCESS
