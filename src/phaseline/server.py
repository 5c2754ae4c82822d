"""FastMCP server — lifecycle analysis tools."""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Annotated, Any, Literal

from fastmcp import FastMCP
from pydantic import Field, ValidationError

from phaseline.config import Config
from phaseline.core.engine import LifecycleEngine
from phaseline.core.timeutil import parse_timestamp
from phaseline.messages import phase_description, phase_name
from phaseline.models.analysis import PHASE_ORDER
from phaseline.models.project import Project, Task

logger = logging.getLogger(__name__)


def _json(data: dict[str, Any]) -> str:
    return json.dumps(data, default=str, ensure_ascii=False)


def _ok(data: dict[str, Any]) -> str:
    """Return a versioned JSON success response."""
    return _json({**data, "_v": "1.0"})


def _err(msg: str) -> str:
    """Return a versioned JSON error response."""
    return _json({"_v": "1.0", "error": msg})


def create_server(config: Config | None = None) -> FastMCP:
    """Create FastMCP server with the lifecycle tools."""
    mcp = FastMCP("phaseline", version="0.1.0")
    base_config = config or Config()

    def _engine(locale: str | None) -> LifecycleEngine:
        if locale:
            return LifecycleEngine(dataclasses.replace(base_config, locale=locale))
        return LifecycleEngine(base_config)

    # ── lc_analyze ────────────────────────────────────────────

    @mcp.tool()
    async def lc_analyze(
        project: Annotated[
            dict[str, Any],
            Field(description="Project record with at least id and createdAt"),
        ],
        tasks: Annotated[
            list[dict[str, Any]],
            Field(description="Task records; other projects' tasks are ignored"),
        ],
        now: Annotated[
            str | None,
            Field(description="ISO-8601 instant to analyse at (default: current time)"),
        ] = None,
        locale: Annotated[
            Literal["en", "es"] | None,
            Field(description="Language for names and explanation"),
        ] = None,
        detail: Annotated[
            Literal["summary", "full"],
            Field(description="summary or full (default: summary)"),
        ] = "summary",
    ) -> str:
        """Infer lifecycle phase, health, progress and deployment estimate from project tasks."""
        try:
            parsed_project = Project.model_validate(project)
            parsed_tasks = [Task.model_validate(t) for t in tasks]
        except ValidationError as e:
            first = e.errors()[0]
            where = ".".join(str(p) for p in first["loc"])
            return _err(f"Invalid input at {where}: {first['msg']}")

        at = None
        if now:
            at = parse_timestamp(now)
            if at is None:
                return _err(f"Invalid timestamp for now: {now}")

        analysis = _engine(locale).analyze(parsed_project, parsed_tasks, now=at)
        return _ok(analysis.to_response(detail=detail))

    # ── lc_phases ─────────────────────────────────────────────

    @mcp.tool()
    async def lc_phases(
        locale: Annotated[
            Literal["en", "es"] | None,
            Field(description="Language for phase names"),
        ] = None,
    ) -> str:
        """List the seven lifecycle phases in order with display names."""
        lang = locale or base_config.resolved_locale
        phases = [
            {
                "id": phase,
                "order": index + 1,
                "name": phase_name(lang, phase),
                "description": phase_description(lang, phase),
            }
            for index, phase in enumerate(PHASE_ORDER)
        ]
        return _ok({"count": len(phases), "phases": phases})

    logger.debug("Created phaseline MCP server")
    return mcp
