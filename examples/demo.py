"""Demo walking one project through its lifecycle with phaseline.

Builds a task set step by step (kick-off, design, development, testing,
release, new work after delivery) and shows how the inferred phase, health
and progress change along the way.
"""

import json
from datetime import UTC, datetime, timedelta

from rich.console import Console
from rich.json import JSON
from rich.panel import Panel

from phaseline import LifecycleEngine, Project, Task

console = Console()

NOW = datetime(2025, 6, 2, 12, 0, tzinfo=UTC)


def step_header(num: int, title: str) -> None:
    """Display a colorful step header."""
    console.print()
    console.print(
        Panel(
            f"[bold cyan]Step {num}:[/bold cyan] [yellow]{title}[/yellow]",
            border_style="cyan",
        )
    )


def display_json(data: dict, title: str | None = None) -> None:
    """Display JSON data in a panel."""
    json_str = json.dumps(data, indent=2, ensure_ascii=False)
    console.print(Panel(JSON(json_str), title=title, border_style="green"))


def task(n: int, title: str, status: str = "pending", **extra) -> Task:
    return Task(
        id=f"t-{n}",
        title=title,
        status=status,
        project_id="demo",
        created_at=NOW - timedelta(days=20 - n),
        updated_at=NOW - timedelta(days=10 - n / 2),
        **extra,
    )


def main() -> None:
    """Run the demo."""
    engine = LifecycleEngine()
    console.print("[bold magenta]PHASELINE DEMO: one project, seven phases[/bold magenta]")

    project = Project(id="demo", name="Thesis Portal", created_at=NOW - timedelta(days=1))
    backlog = [task(n, f"Feature {n}") for n in range(1, 9)]

    step_header(1, "Kick-off: a fresh backlog, nothing started")
    display_json(engine.analyze(project, backlog, now=NOW).to_response(), "analysis")

    project = project.model_copy(update={"created_at": NOW - timedelta(days=30)})
    step_header(2, "Two weeks later: one task done, the rest still queued")
    tasks = [backlog[0].model_copy(update={"status": "done"}), *backlog[1:]]
    display_json(engine.analyze(project, tasks, now=NOW).to_response(), "analysis")

    step_header(3, "Development in full swing")
    tasks = [
        *(t.model_copy(update={"status": "done"}) for t in backlog[:3]),
        *(t.model_copy(update={"status": "in-progress"}) for t in backlog[3:6]),
        *backlog[6:],
    ]
    display_json(engine.analyze(project, tasks, now=NOW).to_response(), "analysis")

    step_header(4, "Almost there: test tasks show up")
    tasks = [t.model_copy(update={"status": "done"}) for t in backlog[:7]] + [
        task(9, "Integration tests", "in-progress")
    ]
    display_json(engine.analyze(project, tasks, now=NOW).to_response(), "analysis")

    step_header(5, "Release scheduled, one critical task overdue")
    tasks = [t.model_copy(update={"status": "done"}) for t in backlog] + [
        task(10, "Deploy to production", priority="high", due_date=NOW - timedelta(days=1))
    ]
    display_json(engine.analyze(project, tasks, now=NOW).to_response(), "analysis")

    step_header(6, "Everything delivered")
    tasks = [t.model_copy(update={"status": "done"}) for t in backlog]
    result = engine.analyze(project, tasks, now=NOW)
    display_json(result.to_response(detail="full"), "analysis (full)")

    console.print()
    console.print(f"[bold green]Final phase:[/bold green] {result.phase_info.name}")


if __name__ == "__main__":
    main()
