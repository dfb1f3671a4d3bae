"""Config-file layer for compound options.

Provides flat section grouping (``prefix + identifier`` keys) and YAML
loading of option schemas and config files.

Example
-------
>>> from compound_config.config import OptionSchema
>>> schema = OptionSchema.from_yaml("schema.yaml")
>>> print(schema.list_options())
['command/bindings']
>>> schema.apply_config("config.yaml")
{'command/bindings': True}
"""

from .section import (
    compound_to_section,
    group_compound_rows,
    layout_rows,
    update_compound_from_section,
)
from .loader import (
    OptionSchema,
    compound_option_from_dict,
    load_flat_config,
)

__all__ = [
    "OptionSchema",
    "compound_option_from_dict",
    "load_flat_config",
    "group_compound_rows",
    "update_compound_from_section",
    "compound_to_section",
    "layout_rows",
]
