"""Loading of carpet job files.

A job file is JSON holding the rooms to cut (structured or as bulk text),
the steps/slippage options and optional packing tunables. Every failure,
from a missing file to a negative room width, surfaces as one
``ConfigError`` whose ``error_type`` tells the caller which stage failed.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from carpets.application.config.schema import CarpetConfiguration


class ConfigError(Exception):
    """A carpet job could not be loaded.

    Attributes:
        message: Human-readable summary, safe to print as is.
        error_type: Stage that failed. One of ``file_not_found``,
            ``permission_denied``, ``file_read_error``, ``json_parse``,
            ``validation`` or ``parse`` (a bad bulk measurement entry).
        path: Job file involved, or None for in-memory data.
        details: One dict per problem. JSON errors carry line/column,
            validation errors a dotted ``path``, bulk errors the ``entry``.
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _json_path(loc: tuple[str | int, ...]) -> str:
    """Render a Pydantic error location the way the job file is written.

    Examples:
        >>> _json_path(("options", "steps"))
        'options.steps'
        >>> _json_path(("rooms", 0, "width_feet"))
        'rooms[0].width_feet'
    """
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        elif path:
            path += f".{segment}"
        else:
            path = str(segment)
    return path


def _validation_details(error: PydanticValidationError) -> list[dict[str, Any]]:
    return [
        {
            "path": _json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def _describe(details: list[dict[str, Any]]) -> str:
    lines = [f"Invalid carpet job ({len(details)} problem(s)):"]
    for detail in details:
        line = f"  - {detail['path'] or '(job)'}: {detail['message']}"
        value = detail.get("value")
        if value is not None and not isinstance(value, (dict, list)):
            line += f" (got {value!r})"
        lines.append(line)
    return "\n".join(lines)


def _validate(data: Any, path: Path | None = None) -> CarpetConfiguration:
    try:
        return CarpetConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _validation_details(e)
        raise ConfigError(_describe(details), "validation", path, details) from e


def _read_job_file(path: Path) -> str:
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}", "file_not_found", path)
    try:
        return path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ConfigError(
            f"Cannot read job file (permission denied): {path}", "permission_denied", path
        ) from e
    except OSError as e:
        raise ConfigError(f"Cannot read job file {path}: {e}", "file_read_error", path) from e


def load_config(path: Path) -> CarpetConfiguration:
    """Load a carpet job from a JSON file.

    Args:
        path: Job file to read.

    Returns:
        The validated job.

    Raises:
        ConfigError: With ``file_not_found``, ``permission_denied`` or
            ``file_read_error`` when the file cannot be read,
            ``json_parse`` for malformed JSON and ``validation`` when the
            rooms, options or packing tunables are out of range.
    """
    content = _read_job_file(path)
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Job file {path} is not valid JSON: {e.msg} at line {e.lineno}, column {e.colno}",
            "json_parse",
            path,
            [{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e
    return _validate(data, path)


def load_config_from_dict(data: dict[str, Any]) -> CarpetConfiguration:
    """Validate a carpet job already decoded from JSON (e.g. a request body)."""
    return _validate(data)
