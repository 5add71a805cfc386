"""Plan definition files.

A plan is stored as YAML (``.yaml``/``.yml``) or JSON (``.json``/``.jsn``);
the format follows the file extension. Loaded data is validated into a
``Plan``; anything that prevents that is reported as ``PlanFileError``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from kneeboard.contracts.plan import Plan
from kneeboard.errors import PlanFileError

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}
JSON_SUFFIXES = {".json", ".jsn"}


def _file_format(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix in YAML_SUFFIXES:
        return "yaml"
    if suffix in JSON_SUFFIXES:
        return "json"
    raise PlanFileError(str(path), f"unsupported file type {suffix or '(none)'!r}")


def load_plan(path: str | Path) -> Plan:
    """Read and validate a plan definition file."""
    path = Path(path)
    file_format = _file_format(path)

    try:
        with path.open("r", encoding="utf-8") as f:
            if file_format == "yaml":
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except OSError as e:
        raise PlanFileError(str(path), f"cannot read file ({e.strerror or e})") from e
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise PlanFileError(str(path), f"invalid {file_format.upper()}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise PlanFileError(str(path), "expected a mapping at the top level")

    try:
        plan = Plan.from_dict(data)
    except ValidationError as e:
        raise PlanFileError(str(path), f"invalid plan: {e}") from e

    logger.info(
        "Loaded plan %s: %d routes, %d diversions, %d holds",
        path,
        len(plan.routes),
        len(plan.diversions),
        len(plan.holds),
    )
    return plan


def dump_plan(plan: Plan, path: str | Path) -> None:
    """Write ``plan`` in the format given by the file extension."""
    path = Path(path)
    file_format = _file_format(path)
    data = plan.to_dict()

    with path.open("w", encoding="utf-8") as f:
        if file_format == "yaml":
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False, allow_unicode=True)
        else:
            json.dump(data, f, indent=2, ensure_ascii=False)

    logger.info("Wrote plan %s", path)
