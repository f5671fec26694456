"""Typer-based CLI for the campus LAN operations dashboard."""

import asyncio
import json
import typer
from campus_noc.aggregators import format_uptime
from campus_noc.models import (
    ComplianceState,
    ConfigDiff,
    DashboardState,
    DashboardView,
    InsufficientHistory,
)
from campus_noc.orchestrator import DashboardOrchestrator, range_to_days
from campus_noc.utils.client import DashboardClient
from campus_noc.utils.errors import DashboardError
from campus_noc.utils.logging import configure_logging
from campus_noc.utils.settings import BackendSettings
from pathlib import Path
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from typing import Annotated, Optional


console = Console()

app = typer.Typer(
    name='campus-noc',
    help='Campus LAN operations dashboard',
    rich_markup_mode='rich',
    no_args_is_help=True,
)


class State:
    """Global CLI state."""

    env_file: Optional[Path] = None
    debug: bool = False


state = State()


@app.callback()
def main(
    env_file: Annotated[
        Optional[Path],
        typer.Option(
            '--env-file',
            '-e',
            help='Path to .env configuration file',
            envvar='CAMPUS_NOC_ENV_FILE',
        ),
    ] = None,
    debug: Annotated[bool, typer.Option('--debug', help='Log to the console')] = False,
):
    """Campus LAN operations dashboard."""
    state.env_file = env_file
    state.debug = debug


def _load_settings() -> BackendSettings:
    settings = BackendSettings.from_env(str(state.env_file) if state.env_file else None)
    configure_logging(
        log_level='DEBUG' if state.debug else settings.log_level,
        include_console=state.debug,
    )
    return settings


@app.command()
def dashboard(
    range_token: Annotated[
        str, typer.Option('--range', '-r', help='Trailing window: 7d or 30d')
    ] = '7d',
    as_json: Annotated[bool, typer.Option('--json', help='Print the view model as JSON')] = False,
):
    """Refresh the dashboard once and print every panel."""
    try:
        range_to_days(range_token)
        settings = _load_settings()
        result = asyncio.run(_refresh(settings, range_token))
    except DashboardError as e:
        console.print(f'[red]{escape(str(e))}[/red]')
        raise typer.Exit(1)

    if as_json:
        typer.echo(result.model_dump_json(indent=2))
        return

    _print_dashboard(result)


@app.command('config-diff')
def config_diff(
    device_id: Annotated[str, typer.Argument(help='Device identifier')],
    as_json: Annotated[bool, typer.Option('--json', help='Print the result as JSON')] = False,
):
    """Show the last two configuration backups of a device."""
    try:
        settings = _load_settings()
        diff = asyncio.run(_config_diff(settings, device_id))
    except DashboardError as e:
        console.print(f'[red]{escape(str(e))}[/red]')
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(diff.model_dump(mode='json'), indent=2))
        return

    _print_config_diff(diff)


async def _refresh(settings: BackendSettings, range_token: str) -> DashboardState:
    async with DashboardClient(settings) as client:
        orchestrator = DashboardOrchestrator(client)
        return await orchestrator.refresh(range_token)


async def _config_diff(settings: BackendSettings, device_id: str) -> ConfigDiff:
    async with DashboardClient(settings) as client:
        orchestrator = DashboardOrchestrator(client)
        return await orchestrator.select_device(device_id)


def _avg(value: int | None) -> str:
    return '-' if value is None else f'{value}%'


def _print_dashboard(result: DashboardState) -> None:
    view: DashboardView = result.view
    kpis = view.kpis

    console.print(f'\n[bold]LAN Network Automation Dashboard[/bold] (last {view.range_days} days)')
    console.print(
        f'{kpis.total_devices} Devices | Avg health {kpis.avg_health}% | '
        f'Automation success {kpis.automation_success_rate}% | Open alerts {kpis.open_alerts}'
    )

    roles = Table(title='Device Health by Role')
    for column in ('Role', 'Devices', 'CPU', 'Memory', 'Health'):
        roles.add_column(column)
    for stats in view.roles.roles:
        roles.add_row(
            stats.label,
            str(stats.count),
            _avg(stats.avg_cpu),
            _avg(stats.avg_memory),
            _avg(stats.avg_health),
        )
    console.print(roles)

    if view.uptime.longest and view.uptime.shortest:
        console.print(
            f'Longest uptime: {view.uptime.longest.display_name} '
            f'({format_uptime(view.uptime.longest.uptime_hours)})  '
            f'Shortest uptime: {view.uptime.shortest.display_name} '
            f'({format_uptime(view.uptime.shortest.uptime_hours)})'
        )

    automation = view.automation
    tasks = Table(
        title=f'Automation: {automation.success}/{automation.total} succeeded '
        f'({automation.success_rate}%)'
    )
    for column in ('Task ID', 'Type', 'Devices', 'Duration', 'Status'):
        tasks.add_column(column)
    for task in automation.recent:
        duration = '-' if task.duration_seconds is None else f'{task.duration_seconds:.1f}s'
        tasks.add_row(task.task_id, task.task_type, str(task.device_count), duration, task.status)
    console.print(tasks)

    compliance = view.compliance
    percent = '-' if compliance.overall_percent is None else f'{compliance.overall_percent:g}%'
    console.print(f'\n[bold]Compliance[/bold] {percent}')
    if compliance.state == ComplianceState.NO_DATA:
        console.print('No compliance data available.')
    elif compliance.state == ComplianceState.ALL_COMPLIANT:
        console.print('[green]All devices compliant.[/green]')
    else:
        findings = Table()
        for column in ('Device', 'Status', 'Failed rules'):
            findings.add_column(column)
        for device in compliance.non_compliant_devices:
            findings.add_row(device.device_name, device.status, ', '.join(device.failed_rules))
        console.print(findings)

    alerts = view.alerts
    histogram = ', '.join(f'{k}: {v}' for k, v in alerts.severity_histogram.items())
    console.print(f'\n[bold]Alerts[/bold] open {alerts.open} / closed {alerts.closed} ({histogram})')
    for day in alerts.per_day:
        console.print(f'  {day.day}: {day.count}')

    trends = view.trends
    console.print(f'\n[bold]Trends[/bold] {len(trends.points)} points ({trends.dropped} dropped)')

    console.print('\n[bold]Recommendations[/bold]')
    for category in view.recommendations.categories:
        console.print(f'  [cyan]{category.category}[/cyan]')
        for item in category.items:
            console.print(f'    - {escape(item)}')

    if result.config_diff is not None:
        _print_config_diff(result.config_diff)


def _print_config_diff(diff: ConfigDiff) -> None:
    console.print(f'\n[bold]Before / After Configuration[/bold] ({diff.device_id})')
    if isinstance(diff, InsufficientHistory):
        console.print(escape(diff.message))
        return

    for label, snapshot in (('Before', diff.before), ('After', diff.after)):
        taken = snapshot.timestamp.isoformat() if snapshot.timestamp else '-'
        console.print(f'  [cyan]{label}[/cyan] {snapshot.config_version} ({taken})')
        for line in snapshot.change_summary:
            console.print(f'    - {escape(line)}')


if __name__ == '__main__':
    app()
