"""JSON bridge: compact serialization and type restoration from JSON text.

Restoration is split in two steps: :func:`parse` turns text into plain data,
:func:`bind` attaches that data to an instance of a given type without running
the type's constructor. :func:`restore_typed` chains them.
"""

from __future__ import annotations

import dataclasses
import json
import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from objtasks.errors import ParseError

__all__ = ["serialize", "parse", "bind", "restore_typed"]

logger = logging.getLogger(__name__)

T = TypeVar("T")

_COMPACT_SEPARATORS = (",", ":")


def _public_attributes(obj: object) -> dict[str, Any]:
    """Return the JSON-visible attributes of a plain object."""
    if callable(obj):
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        attrs = {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    elif hasattr(obj, "__dict__"):
        attrs = dict(vars(obj))
    else:
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
    # Function-valued members are dropped, as a JavaScript stringify does.
    return {
        key: value
        for key, value in attrs.items()
        if not key.startswith("_") and not callable(value)
    }


def serialize(
    value: Any, *, indent: int | None = None, sort_keys: bool = False
) -> str:
    """Return the JSON text of *value*.

    Output is compact unless *indent* is given. Key order follows insertion
    order unless *sort_keys* is set. NaN and infinities are rejected with
    ``ValueError``; circular references raise ``ValueError`` as well.
    """
    separators = _COMPACT_SEPARATORS if indent is None else None
    return json.dumps(
        value,
        default=_public_attributes,
        indent=indent,
        separators=separators,
        sort_keys=sort_keys,
        ensure_ascii=False,
        allow_nan=False,
    )


def _reject_constant(name: str) -> Any:
    raise ParseError(f"Invalid JSON: {name} is not a JSON value")


def parse(text: str) -> Any:
    """Parse JSON *text* into plain Python data.

    Only standard JSON is accepted; the ``NaN``, ``Infinity`` and
    ``-Infinity`` extensions raise :class:`ParseError`.
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        logger.debug("Rejected JSON input at line %d column %d: %s", e.lineno, e.colno, e.msg)
        raise ParseError(f"Invalid JSON: {e.msg}", line=e.lineno, column=e.colno) from e


def bind(type_descriptor: type[T], record: Mapping[str, Any]) -> T:
    """Attach the keys of *record* to a new, uninitialised *type_descriptor*.

    ``__init__`` is never called, so constructor side effects do not run. The
    returned object answers to the type's methods, and its attributes come
    only from *record*. Keys are stored in the instance ``__dict__``; a key
    that shadows a property of the type is kept there but the property still
    wins on attribute access. Slotted types are filled through their slots.
    """
    if not isinstance(record, Mapping):
        raise TypeError(
            f"Cannot bind {type(record).__name__} to {type_descriptor.__name__}: "
            "expected a JSON object"
        )
    instance = type_descriptor.__new__(type_descriptor)
    namespace = getattr(instance, "__dict__", None)
    if namespace is not None:
        # Stored directly: property setters and frozen dataclass guards never run.
        namespace.update(record)
    else:
        for key, value in record.items():
            object.__setattr__(instance, key, value)
    logger.debug("Bound %d attribute(s) to %s", len(record), type_descriptor.__name__)
    return instance


def restore_typed(type_descriptor: type[T], text: str) -> T:
    """Parse *text* and bind the resulting object to *type_descriptor*."""
    return bind(type_descriptor, parse(text))
