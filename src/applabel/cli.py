"""Command-line interface for applabel."""

import sys
import click
from pathlib import Path

from applabel.version import get_version
from applabel.config import ConfigError, LabelSettings, get_settings, setting_names
from applabel.manifest import PlaceholderInjector
from applabel.resolution import LabelResolution, LabelResolver
from applabel.utils.console import (
    _rich_success, _rich_error, _rich_info, _rich_warning, _rich_panel,
    _create_settings_table, _get_console, STATUS_SYMBOLS
)


def print_version(ctx, param, value):
    """Print version and exit."""
    if not value or ctx.resilient_parsing:
        return

    from rich.text import Text
    version_text = Text()
    version_text.append("applabel", style="bold cyan")
    version_text.append(f" version {get_version()}", style="white")
    _rich_panel(version_text)
    ctx.exit()


def _load_settings(ctx, quiet: bool = False, **overrides) -> LabelSettings:
    """Load settings, warning and falling back to defaults on a broken applabel.yml.

    With `quiet`, nothing is printed so stdout carries only the label.
    """
    project_dir = ctx.obj.get('project_dir') if ctx.obj else None
    try:
        return get_settings(project_dir, overrides=overrides)
    except ConfigError as e:
        if not quiet:
            _rich_warning(f"{e}; ignoring it", symbol="warning")
        return get_settings(project_dir, overrides=overrides, use_config_file=False)


def _resolve(settings: LabelSettings, constants_file: str = None, quiet: bool = False) -> LabelResolution:
    path = Path(constants_file) if constants_file else settings.constants_path()
    try:
        resolver = LabelResolver(
            default_label=settings.default_label,
            name_symbol=settings.name_symbol,
            version_symbol=settings.version_symbol,
        )
    except ValueError as e:
        if not quiet:
            _rich_warning(f"{e}; using default symbols", symbol="warning")
        resolver = LabelResolver(default_label=settings.default_label)
    return resolver.resolve(path)


def _report_resolution(resolution: LabelResolution):
    """Report how the label was obtained."""
    if resolution.used_default:
        _rich_warning(
            f"{resolution.status.description} ({resolution.source_path}); using default label",
            symbol="warning"
        )
    _rich_info(f"Using app label: {resolution.label}", symbol="tag")


@click.group(help="Derive an app display label from a constants source file")
@click.option('--version', is_flag=True, callback=print_version,
              expose_value=False, is_eager=True, help="Show version and exit.")
@click.option('--project-dir', '-C', type=click.Path(file_okay=False, path_type=Path),
              help="Project directory holding applabel.yml (defaults to cwd)")
@click.pass_context
def cli(ctx, project_dir):
    """Main entry point for the applabel CLI."""
    ctx.ensure_object(dict)
    ctx.obj['project_dir'] = project_dir


@cli.command(help="Resolve the app label from a constants file")
@click.argument('constants_file', required=False)
@click.option('--default', 'default_label', help="Label used when extraction fails")
@click.option('--name-symbol', help="Constant holding the app name")
@click.option('--version-symbol', help="Constant holding the app version")
@click.option('--quiet', '-q', is_flag=True, help="Print only the label")
@click.pass_context
def resolve(ctx, constants_file, default_label, name_symbol, version_symbol, quiet):
    """Resolve and print the label. Always exits 0: failures fall back to the default."""
    settings = _load_settings(
        ctx,
        quiet=quiet,
        default_label=default_label,
        name_symbol=name_symbol,
        version_symbol=version_symbol,
    )
    resolution = _resolve(settings, constants_file, quiet=quiet)

    if quiet:
        click.echo(resolution.label)
        return

    _report_resolution(resolution)


@cli.command(help="Inject the resolved label into a manifest placeholder")
@click.argument('manifest', type=click.Path(dir_okay=False, path_type=Path))
@click.option('--constants', 'constants_file', help="Constants file (overrides applabel.yml)")
@click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path),
              help="Write the rendered manifest here")
@click.option('--in-place', is_flag=True,
              help="Rewrite MANIFEST itself; its placeholder is consumed")
@click.option('--placeholder', help="Placeholder name, as in ${appLabel}")
@click.option('--dry-run', is_flag=True, help="Print the rendered manifest without writing")
@click.pass_context
def inject(ctx, manifest, constants_file, output, in_place, placeholder, dry_run):
    """Resolve the label and substitute it into MANIFEST."""
    if output and in_place:
        raise click.UsageError("--output and --in-place are mutually exclusive")
    if not (output or in_place or dry_run):
        raise click.UsageError("Pass --output PATH, or --in-place to rewrite the template itself")

    settings = _load_settings(ctx, placeholder=placeholder)
    resolution = _resolve(settings, constants_file)
    _report_resolution(resolution)

    try:
        injector = PlaceholderInjector(settings.placeholder)
        result = injector.inject_file(manifest, resolution.label, output_path=output, dry_run=dry_run)
    except (ValueError, OSError) as e:
        _rich_error(str(e), symbol="error")
        sys.exit(1)

    if dry_run:
        click.echo(result.content, nl=False)
        return

    if result.status == "MISSING":
        _rich_warning(f"No ${{{settings.placeholder}}} placeholder in {manifest}", symbol="warning")
    elif result.status == "UNCHANGED":
        _rich_info(f"{result.output_path} already up to date", symbol="check")
    else:
        _rich_success(
            f"Injected label into {result.output_path} ({result.replacements} placeholder(s))",
            symbol="success"
        )


@cli.command(name="config", help="Show effective settings")
@click.pass_context
def show_config(ctx):
    """Show effective settings and where each value came from."""
    settings = _load_settings(ctx)
    rows = [(key, getattr(settings, key), settings.source_of(key)) for key in setting_names()]
    _get_console().print(_create_settings_table(rows, title="applabel settings"))
    _rich_info(f"Constants file: {settings.constants_path()}", symbol="info")


def main():
    """Main entry point for the CLI."""
    try:
        cli(obj={})
    except Exception as e:
        click.echo(f"{STATUS_SYMBOLS['error']} Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
