"""
Error template rendering.

Templates carry ``{{ name }}`` placeholders that are replaced with variable
values when an error is reported.
"""

import re
from collections.abc import Mapping
from typing import Any

PLACEHOLDER = re.compile(r"{{\s*([a-zA-Z_][a-zA-Z0-9_]*)\s*}}")


def render_template(template: str, variables: Mapping[str, Any]) -> str:
    """
    Replace ``{{ name }}`` placeholders with their variable values.

    Whitespace inside the braces is optional. Placeholders whose name has no
    variable are left as they are.

    Args:
        template: Error template
        variables: Placeholder name to value

    Returns:
        The rendered string

    Examples:
        >>> render_template("too short, need {{min}} chars", {"min": 5})
        'too short, need 5 chars'
        >>> render_template("unknown {{ foo }}", {})
        'unknown {{ foo }}'
    """

    def substitute(match: re.Match) -> str:
        name = match.group(1)
        if name not in variables:
            return match.group(0)
        return format_value(variables[name])

    return PLACEHOLDER.sub(substitute, template)


def format_value(value: Any) -> str:
    """Format a variable for display in an error message."""
    if value is None:
        return ""
    return str(value)
