"""Rendering of bundled manifest templates.

Templates use Jinja2 syntax with two helper functions available:

- `indent(width, text)` replaces every line break in `text` with a line break
  followed by `width` spaces, for inlining multi-line values in YAML blocks.
- `add(a, b)` returns the sum of two integers.

Templates ship with the package, so any failure to parse or render one is
raised as a `TemplateFault` rather than a recoverable error.
"""

from collections.abc import Mapping
import dataclasses
import logging
from typing import Any

import jinja2

from cluster_manifests.exceptions import TemplateFault

__all__ = ["render", "indent", "add"]

_LOGGER = logging.getLogger(__name__)


def indent(width: int, text: str) -> str:
    """Indent every line after the first by `width` spaces."""
    return text.replace("\n", "\n" + " " * width)


def add(a: int, b: int) -> int:
    """Return the sum of the two integers."""
    return a + b


def _environment() -> jinja2.Environment:
    env = jinja2.Environment(
        autoescape=False,
        undefined=jinja2.StrictUndefined,
        keep_trailing_newline=True,
    )
    env.globals["indent"] = indent
    env.globals["add"] = add
    return env


def _context_dict(context: Any) -> Mapping[str, Any]:
    if dataclasses.is_dataclass(context) and not isinstance(context, type):
        return {f.name: getattr(context, f.name) for f in dataclasses.fields(context)}
    if isinstance(context, Mapping):
        return context
    raise TypeError(f"Unsupported template context {type(context).__name__}")


def render(template: bytes, context: Any, name: str = "template") -> bytes:
    """Render the template with the fields of the context.

    Raises:
        TemplateFault: If the template is malformed or references a field
            that the context does not have.
    """
    try:
        compiled = _environment().from_string(template.decode("utf-8"))
        result = compiled.render(_context_dict(context))
    except (jinja2.TemplateError, UnicodeDecodeError) as err:
        _LOGGER.critical("Unable to render bundled template %s: %s", name, err)
        raise TemplateFault(f"failed to render template {name}: {err}") from err
    return result.encode("utf-8")
