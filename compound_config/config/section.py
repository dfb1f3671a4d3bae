"""Mapping between flat config sections and compound options.

A section is a flat ``key -> text`` mapping. Each key of a compound option
is ``prefix + identifier``; keys sharing an identifier form one row.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence

from ..core import CompoundOption

logger = logging.getLogger(__name__)


def _match_prefix(key: str, prefixes: Sequence[str]) -> Optional[str]:
    """Return the longest prefix that key starts with (and extends)."""
    best = None
    for prefix in prefixes:
        if key.startswith(prefix) and len(key) > len(prefix):
            if best is None or len(prefix) > len(best):
                best = prefix
    return best


def group_compound_rows(
    option: CompoundOption,
    section: Mapping[str, str],
) -> List[List[str]]:
    """Collect the rows of option from a flat section.

    Parameters
    ----------
    option : CompoundOption
        Option whose entry prefixes select the keys
    section : Mapping[str, str]
        Flat section contents

    Returns
    -------
    List[List[str]]
        ``[identifier, cell_1, ...]`` rows, ordered by first appearance of
        the identifier. Identifiers missing a key for any prefix are skipped.
    """
    prefixes = [entry.prefix for entry in option.get_entries()]

    identifiers: List[str] = []
    seen = set()
    for key in section:
        if _match_prefix(key, prefixes) != prefixes[0]:
            continue
        identifier = key[len(prefixes[0]):]
        if identifier not in seen:
            seen.add(identifier)
            identifiers.append(identifier)

    rows = []
    for identifier in identifiers:
        keys = [prefix + identifier for prefix in prefixes]
        complete = all(
            key in section and _match_prefix(key, prefixes) == prefix
            for key, prefix in zip(keys, prefixes)
        )
        if not complete:
            logger.debug(
                f"Option '{option.name}': skipping incomplete row '{identifier}'"
            )
            continue
        rows.append([identifier] + [section[key] for key in keys])
    return rows


def update_compound_from_section(
    option: CompoundOption,
    section: Mapping[str, str],
) -> bool:
    """Set option from the rows found in section.

    Returns
    -------
    bool
        True if the rows were accepted; otherwise the option is unchanged
    """
    rows = group_compound_rows(option, section)
    if option.set_value_untyped(rows):
        logger.debug(f"Option '{option.name}': loaded {len(rows)} rows")
        return True

    logger.warning(f"Option '{option.name}': rejected invalid value, keeping previous")
    return False


def compound_to_section(option: CompoundOption) -> Dict[str, str]:
    """Flatten option into ``prefix + identifier -> text`` entries."""
    prefixes = [entry.prefix for entry in option.get_entries()]
    section: Dict[str, str] = {}
    for row in option.get_value_untyped():
        identifier = row[0]
        for prefix, cell in zip(prefixes, row[1:]):
            section[prefix + identifier] = cell
    return section


def layout_rows(option: CompoundOption) -> Any:
    """Arrange option rows for a human-edited file, following its type hint.

    - ``plain``: list of cell lists without identifiers (bare cells when the
      option has a single entry)
    - ``dict``: identifier -> {entry label: cell}
    - ``tuple``: list of full rows, identifier first
    """
    rows = option.get_value_untyped()
    hint = option.get_type_hint()
    if hint == "plain":
        if option.arity == 1:
            return [row[1] for row in rows]
        return [row[1:] for row in rows]
    if hint == "dict":
        labels = [entry.name or entry.prefix for entry in option.get_entries()]
        return {row[0]: dict(zip(labels, row[1:])) for row in rows}
    return rows
