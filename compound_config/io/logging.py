"""Logging and validation reports for compound-config.

Library modules log through ``logging.getLogger(__name__)``, so every record
ends up under the ``compound_config`` logger. This module mirrors that logger
into a file and writes YAML reports of config validation runs.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any, Mapping, Union

import yaml

if TYPE_CHECKING:
    from ..config import OptionSchema

PathLike = Union[str, Path]

PACKAGE_LOGGER = "compound_config"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def log_to_file(
    log_path: PathLike,
    level: int = logging.INFO,
    timestamped: bool = True,
) -> Path:
    """Write the package's log records to a file.

    A previous file handler installed by this function is replaced, so
    repeated calls never log the same record twice.

    Parameters
    ----------
    log_path : PathLike
        Base path for the log file.
    level : int
        Level of the package logger (default: INFO).
    timestamped : bool
        If True, ``options.log`` becomes ``options_YYYYmmdd_HHMMSS.log``
        so earlier runs are kept.

    Returns
    -------
    Path
        The file actually written to.
    """
    path = Path(log_path)
    if timestamped:
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        path = path.with_name(f"{path.stem}_{stamp}{path.suffix or '.log'}")
    path.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        if isinstance(handler, logging.FileHandler):
            logger.removeHandler(handler)
            handler.close()

    handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)
    return path


def validation_record(
    schema: "OptionSchema",
    results: Mapping[str, bool],
    schema_path: PathLike | None = None,
    config_path: PathLike | None = None,
) -> dict[str, Any]:
    """Summarize one ``OptionSchema.apply_config`` run.

    Parameters
    ----------
    schema : OptionSchema
        Schema the config was applied to.
    results : Mapping[str, bool]
        ``section/name`` -> accepted, as returned by ``apply_config``.
    schema_path, config_path : PathLike, optional
        Files the run was loaded from.

    Returns
    -------
    dict
        ``rejected`` lists failing options; ``options`` holds status, row
        count and type hint of every declared option.
    """
    options = {}
    for section, section_options in schema.sections.items():
        for name, option in section_options.items():
            key = f"{section}/{name}"
            accepted = results.get(key)
            options[key] = {
                "status": "unknown" if accepted is None else ("ok" if accepted else "rejected"),
                "rows": len(option),
                "type_hint": option.get_type_hint(),
            }

    return {
        "timestamp": datetime.now().isoformat(timespec="seconds"),
        "schema": None if schema_path is None else str(schema_path),
        "config": None if config_path is None else str(config_path),
        "rejected": [key for key, accepted in results.items() if not accepted],
        "options": options,
    }


def append_report(report_path: PathLike, record: Mapping[str, Any]) -> Path:
    """Append record to a multi-document YAML report file."""
    path = Path(report_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("a", encoding="utf-8") as handle:
        yaml.safe_dump(dict(record), handle, sort_keys=False, explicit_start=True)
    return path
