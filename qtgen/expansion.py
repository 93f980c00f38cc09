"""Field expansion.

Field definitions are resolved strictly in definition order.  Each
expression is rendered against the fields resolved *before* it; a reference
to a field defined later simply renders as empty text.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .context import FieldContext
from .manifest import FieldDefinition
from .templates import TemplateExpander

logger = logging.getLogger(__name__)


def expand_fields(
    definitions: Iterable[FieldDefinition],
    base: FieldContext,
    expander: TemplateExpander,
) -> FieldContext:
    """Resolve *definitions* on top of *base* and return the new snapshot.

    Literal values are copied as they are; string values are rendered through
    *expander* with the accumulated context and the rendered text becomes the
    field's value.  *base* itself is never modified.

    Raises:
        TemplateError: If an expression fails to render.
    """
    accumulated = base
    for definition in definitions:
        if definition.is_expression:
            value = expander.render_string(
                definition.name, definition.value, accumulated
            )
        else:
            value = definition.value
        accumulated = accumulated.with_field(definition.name, value)
        logger.debug("expanded field %s = %r", definition.name, value)
    return accumulated
