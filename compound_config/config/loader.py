"""YAML loading of compound option schemas and flat config files.

Schema files declare the compound options of each section::

    command:
      bindings:
        type_hint: dict
        entries:
          - {prefix: binding_, type: activator, name: binding}
          - {prefix: command_, type: str, name: command}
        default:
          - [terminal, <super> KEY_ENTER, kitty]

Config files hold the flat values, grouped by section::

    command:
      binding_terminal: <super> KEY_ENTER
      command_terminal: alacritty

Example
-------
>>> schema = OptionSchema.from_yaml(Path("schema.yaml"))
>>> results = schema.apply_config("config.yaml")
>>> schema.get_option("command", "bindings").get_value()
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Union

import yaml

from ..core import CompoundOption, CompoundOptionEntry, dump_grid, scalar_text
from .section import update_compound_from_section

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]
FlatConfig = Dict[str, Dict[str, str]]


def _load_yaml_mapping(path: PathLike, kind: str) -> Dict[str, Any]:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"{kind} file not found: {path}")

    with open(path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{kind} file {path} must contain a mapping of sections")
    return data


def compound_option_from_dict(name: str, data: Mapping[str, Any]) -> CompoundOption:
    """Build a compound option from its schema definition.

    Parameters
    ----------
    name : str
        Option name
    data : Mapping[str, Any]
        Definition with ``entries`` and optional ``type_hint``/``default``

    Returns
    -------
    CompoundOption
        New option; set to its default when one is given

    Raises
    ------
    KeyError
        If ``entries`` or an entry ``prefix`` is missing
    ValueError
        If the default rows are not valid for the entries
    """
    if "entries" not in data:
        raise KeyError(f"Option '{name}' missing required field 'entries'")

    entries = []
    for i, entry_def in enumerate(data["entries"]):
        if "prefix" not in entry_def:
            raise KeyError(f"Option '{name}' entry {i} missing required field 'prefix'")
        entries.append(
            CompoundOptionEntry(
                entry_def.get("type", "str"),
                entry_def["prefix"],
                entry_def.get("name", ""),
            )
        )

    option = CompoundOption(name, entries, data.get("type_hint", "tuple"))

    default = data.get("default")
    if default is not None:
        if not option.set_default_value_str(dump_grid(default)):
            raise ValueError(f"Option '{name}' has an invalid default: {default!r}")
        option.reset_to_default()

    return option


def load_flat_config(path: PathLike) -> FlatConfig:
    """Load a ``{section: {key: value}}`` YAML file with values as text.

    Empty values become empty strings.

    Raises
    ------
    FileNotFoundError
        If the file doesn't exist
    ValueError
        If a section is not a mapping or a value is not a scalar
    """
    data = _load_yaml_mapping(path, "Config")

    flat: FlatConfig = {}
    for section, values in data.items():
        if values is None:
            values = {}
        if not isinstance(values, dict):
            raise ValueError(f"Section '{section}' in {path} must be a mapping")

        flat[str(section)] = {}
        for key, value in values.items():
            text = "" if value is None else scalar_text(value)
            if text is None:
                raise ValueError(f"Value of '{section}.{key}' in {path} must be a scalar")
            flat[str(section)][str(key)] = text
    return flat


@dataclass
class OptionSchema:
    """Compound options grouped by config section.

    Attributes
    ----------
    sections : Dict[str, Dict[str, CompoundOption]]
        Map of section name -> option name -> option
    """

    sections: Dict[str, Dict[str, CompoundOption]] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "OptionSchema":
        sections: Dict[str, Dict[str, CompoundOption]] = {}
        for section, options in data.items():
            if not isinstance(options, dict):
                raise ValueError(f"Schema section '{section}' must be a mapping")
            sections[section] = {
                name: compound_option_from_dict(name, definition)
                for name, definition in options.items()
            }
        return cls(sections=sections)

    @classmethod
    def from_yaml(cls, path: PathLike) -> "OptionSchema":
        """Load a schema from a YAML file.

        Raises
        ------
        FileNotFoundError
            If the file doesn't exist
        yaml.YAMLError
            If YAML is malformed
        """
        return cls.from_dict(_load_yaml_mapping(path, "Schema"))

    def get_option(self, section: str, name: str) -> CompoundOption:
        """Get an option by section and name.

        Raises
        ------
        KeyError
            If the option is not declared
        """
        options = self.sections.get(section, {})
        if name not in options:
            raise KeyError(
                f"Unknown option: '{section}/{name}'. "
                f"Available: {self.list_options()}"
            )
        return options[name]

    def list_options(self) -> List[str]:
        """List declared options as ``section/name``."""
        return [
            f"{section}/{name}"
            for section, options in self.sections.items()
            for name in options
        ]

    def apply_config(self, config: Union[PathLike, Mapping[str, Mapping[str, str]]]) -> Dict[str, bool]:
        """Set every declared option from a flat config.

        Options whose section is absent from the config are reset to their
        default. Rejected options keep their previous value.

        Parameters
        ----------
        config : path or mapping
            Flat config file, or already loaded ``{section: {key: text}}``

        Returns
        -------
        Dict[str, bool]
            ``section/name`` -> whether the option accepted its value
        """
        if isinstance(config, (str, Path)):
            config = load_flat_config(config)

        results = {}
        for section, options in self.sections.items():
            values = config.get(section)
            for name, option in options.items():
                key = f"{section}/{name}"
                if values is None:
                    logger.debug(f"Section '{section}' not in config, resetting '{key}'")
                    option.reset_to_default()
                    results[key] = True
                else:
                    results[key] = update_compound_from_section(option, values)
        return results
