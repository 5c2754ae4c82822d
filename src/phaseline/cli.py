"""CLI — init, analyze, phases, serve."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table

from phaseline.config import SUPPORTED_LOCALES, Config
from phaseline.core.activity import humanize_age
from phaseline.core.engine import LifecycleEngine
from phaseline.core.timeutil import parse_timestamp
from phaseline.messages import message, phase_description, phase_name
from phaseline.models.analysis import PHASE_ORDER, LifecycleAnalysis
from phaseline.storage.json_source import load_dataset

PHASE_ICONS = {
    "planning": "📋",
    "analysis-design": "🎨",
    "development": "💻",
    "testing": "🧪",
    "deployment": "🚀",
    "maintenance": "🔧",
    "finalized": "✅",
}

HEALTH_STYLES = {"on-time": "green", "at-risk": "yellow", "delayed": "red"}
TREND_ICONS = {"up": "↑", "stable": "→", "down": "↓", "at-risk": "⚠"}
STATUS_STYLES = {"completed": "green", "in-progress": "cyan", "pending": "dim"}
ACTIVITY_STYLES = {"active": "green", "recent": "blue", "idle": "dim"}
ALERT_STYLES = {"error": "bold red", "warning": "yellow"}


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


@click.group()
@click.version_option(package_name="phaseline")
@click.option(
    "--home",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Config directory (default: ~/.phaseline)",
)
@click.pass_context
def main(ctx: click.Context, home: Path | None) -> None:
    """Phaseline — project lifecycle analysis from task data."""
    config = Config.load(home.expanduser() if home else None)
    _setup_logging(config.log_level)
    ctx.obj = config


@main.command()
@click.option("--locale", type=click.Choice(sorted(SUPPORTED_LOCALES)), default=None)
@click.pass_obj
def init(config: Config, locale: str | None) -> None:
    """Write a config.yaml with the current settings."""
    if locale:
        config.locale = locale
    config.save()
    click.echo(f"Wrote {config.config_file}")


@main.command()
@click.argument("snapshot", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--project", "project_id", default=None, help="Project ID (optional if only one)")
@click.option("--now", default=None, help="Analyse as of this ISO-8601 instant")
@click.option("--locale", type=click.Choice(sorted(SUPPORTED_LOCALES)), default=None)
@click.option("--json", "as_json", is_flag=True, help="Print the full analysis as JSON")
@click.pass_obj
def analyze(
    config: Config,
    snapshot: Path,
    project_id: str | None,
    now: str | None,
    locale: str | None,
    as_json: bool,
) -> None:
    """Analyze a project from a JSON snapshot."""
    if locale:
        config.locale = locale

    at = None
    if now:
        at = parse_timestamp(now)
        if at is None:
            click.echo(f"Error: Invalid timestamp: {now}", err=True)
            sys.exit(1)

    try:
        dataset = load_dataset(snapshot)
        project = dataset.project(project_id)
    except (ValueError, ValidationError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    analysis = LifecycleEngine(config).analyze(project, dataset.tasks, now=at)

    if as_json:
        click.echo(json.dumps(analysis.to_response(detail="full"), indent=2, ensure_ascii=False))
        return

    _render(analysis, project.name or project.id, config.resolved_locale)


@main.command()
@click.option("--locale", type=click.Choice(sorted(SUPPORTED_LOCALES)), default=None)
@click.pass_obj
def phases(config: Config, locale: str | None) -> None:
    """List the lifecycle phases."""
    lang = locale or config.resolved_locale
    table = Table(title=message(lang, "label.phases"))
    table.add_column("#", justify="right")
    table.add_column(message(lang, "label.phase"), style="cyan")
    table.add_column(message(lang, "label.name"), style="bold")
    table.add_column(message(lang, "label.description"))
    for index, phase in enumerate(PHASE_ORDER, start=1):
        table.add_row(
            str(index),
            f"{PHASE_ICONS[phase]} {phase}",
            phase_name(lang, phase),
            phase_description(lang, phase),
        )
    Console().print(table)


@main.command()
@click.option("--transport", type=click.Choice(["stdio"]), default="stdio")
@click.pass_obj
def serve(config: Config, transport: str) -> None:
    """Start the MCP server."""
    from phaseline.server import create_server

    server = create_server(config)
    server.run(transport=transport)  # type: ignore[arg-type]


def _render(analysis: LifecycleAnalysis, title: str, locale: str) -> None:
    console = Console()
    phase = analysis.current_phase
    health_style = HEALTH_STYLES[analysis.health]
    health_label = message(locale, f"health.{analysis.health}")
    trend_label = message(locale, f"trend.{analysis.trend}")

    def label(key: str, **params: object) -> str:
        return message(locale, f"label.{key}", **params)

    progress_line = label(
        "progress", overall=analysis.overall_progress, phase=analysis.phase_progress
    )
    deployment = (
        analysis.estimated_deployment_date.date().isoformat()
        if analysis.estimated_deployment_date
        else "—"
    )
    console.print(
        Panel(
            f"{PHASE_ICONS[phase]} [bold]{analysis.phase_info.name}[/bold] "
            f"({analysis.confidence}%)\n"
            f"{label('health')}: [{health_style}]{health_label}[/{health_style}]   "
            f"{label('trend')}: {TREND_ICONS[analysis.trend]} {trend_label}\n"
            f"{progress_line}\n"
            f"{label('deployment')}: {deployment}",
            title=title,
        )
    )
    console.print(Markdown(analysis.explanation))

    for alert in analysis.alerts:
        style = ALERT_STYLES[alert.severity]
        console.print(f"[{style}]⚠ {alert.title}:[/{style}] {alert.message}")

    timeline = Table(title=label("timeline"))
    timeline.add_column(label("phase"), style="cyan")
    timeline.add_column(label("status"))
    timeline.add_column(label("progress_column"), justify="right")
    for entry in analysis.timeline:
        style = STATUS_STYLES[entry.status]
        marker = " ◀" if entry.id == phase else ""
        timeline.add_row(
            f"{PHASE_ICONS[entry.id]} {entry.name}{marker}",
            f"[{style}]{message(locale, f'status.{entry.status}')}[/{style}]",
            f"{entry.progress}%",
        )
    console.print(timeline)

    if analysis.active_users:
        users = Table(title=label("active_users"))
        users.add_column(label("user"), style="bold")
        users.add_column(label("task"))
        users.add_column(label("phase"), style="cyan")
        users.add_column(label("last_activity"))
        users.add_column(label("status"))
        for activity in analysis.active_users:
            style = ACTIVITY_STYLES[activity.status]
            users.add_row(
                activity.user.name or activity.user.id,
                activity.task.title,
                phase_name(locale, activity.phase),
                humanize_age(activity.last_activity, now=analysis.analyzed_at, locale=locale),
                f"[{style}]{message(locale, f'activity.{activity.status}')}[/{style}]",
            )
        console.print(users)


if __name__ == "__main__":
    main()
