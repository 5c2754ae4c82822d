"""Project, task and user read models consumed by the lifecycle engine."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

# Accepted spellings, including the Spanish values stored by the web app.
_STATUS_ALIASES: dict[str, str] = {
    "pending": "pending",
    "pendiente": "pending",
    "todo": "pending",
    "in-progress": "in-progress",
    "in_progress": "in-progress",
    "en-progreso": "in-progress",
    "done": "done",
    "hecha": "done",
    "completed": "done",
}

_PRIORITY_ALIASES: dict[str, str] = {
    "low": "low",
    "baja": "low",
    "medium": "medium",
    "media": "medium",
    "high": "high",
    "alta": "high",
}

Timestamp = datetime | str | None


def _lift_mongo_id(data: Any) -> Any:
    if isinstance(data, dict) and "id" not in data and "_id" in data:
        data = {**data, "id": data["_id"]}
    return data


class _ReadModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _accept_mongo_id(cls, data: Any) -> Any:
        return _lift_mongo_id(data)

    @field_validator("id", mode="before", check_fields=False)
    @classmethod
    def _stringify_id(cls, value: Any) -> Any:
        return str(value) if isinstance(value, int) else value


class User(_ReadModel):
    """A project member. Identity only, roles do not affect analysis."""

    id: str
    name: str = ""
    email: str | None = None
    role: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _from_bare_id(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"id": data, "name": data}
        return data

    def to_response(self) -> dict:
        return {"id": self.id, "name": self.name}


class Project(_ReadModel):
    """A project as exported by the web app."""

    id: str
    name: str = ""
    description: str = ""
    leader: User | None = None
    members: list[User] = Field(default_factory=list)
    created_at: Timestamp = None


class Task(_ReadModel):
    """A task belonging to a project.

    Timestamps are kept as received and parsed when analysed, so a malformed
    date degrades to "now" instead of rejecting the whole record.
    """

    id: str
    title: str = ""
    description: str = ""
    status: str = "pending"
    priority: str = "medium"
    assignees: list[User] = Field(default_factory=list)
    project_id: str = ""
    due_date: Timestamp = None
    created_at: Timestamp = None
    updated_at: Timestamp = None

    @field_validator("title", "description", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("status", mode="before")
    @classmethod
    def _normalize_status(cls, value: Any) -> Any:
        if not isinstance(value, str):
            return value
        key = value.strip().lower()
        return _STATUS_ALIASES.get(key, key)

    @field_validator("priority", mode="before")
    @classmethod
    def _normalize_priority(cls, value: Any) -> Any:
        if value is None:
            return "medium"
        if not isinstance(value, str):
            return value
        key = value.strip().lower()
        return _PRIORITY_ALIASES.get(key, key)

    @field_validator("project_id", mode="before")
    @classmethod
    def _flatten_project_ref(cls, value: Any) -> Any:
        if isinstance(value, dict):
            value = value.get("id", value.get("_id", ""))
        if value is None:
            return ""
        return str(value)

    @property
    def is_done(self) -> bool:
        return self.status == "done"

    @property
    def is_high_priority(self) -> bool:
        return self.priority == "high"

    def to_response(self, *, detail: str = "summary") -> dict:
        data = {
            "_v": "1.0",
            "id": self.id,
            "title": self.title,
            "status": self.status,
            "priority": self.priority,
        }
        if detail != "summary":
            data.update(
                {
                    "description": self.description,
                    "project_id": self.project_id,
                    "assignees": [a.to_response() for a in self.assignees],
                    "due_date": _iso(self.due_date),
                    "created_at": _iso(self.created_at),
                    "updated_at": _iso(self.updated_at),
                }
            )
        return data


def _iso(value: Timestamp) -> str | None:
    if isinstance(value, datetime):
        return value.isoformat()
    return value
