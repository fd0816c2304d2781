"""Environment variable utilities.

Provides expansion of ${VAR_NAME} patterns in configuration values
(such as ``<include href="${SQL_DIR}/load.sql"/>``).
"""

from __future__ import annotations

import os
import re

__all__ = ["expand_env_vars"]

# Pattern for ${VAR_NAME} or $VAR_NAME
ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}|\$([A-Za-z_][A-Za-z0-9_]*)")


def expand_env_vars(value: str, *, strict: bool = False) -> str:
    """Expand environment variables in a string.

    Supports both ${VAR_NAME} and $VAR_NAME syntax. Unknown variables
    are left as written unless ``strict`` is set.

    Args:
        value: String potentially containing env var references
        strict: If True, raise KeyError for missing variables

    Returns:
        String with environment variables expanded

    Example:
        >>> os.environ["SQL_DIR"] = "/etc/etl/sql"
        >>> expand_env_vars("${SQL_DIR}/load.sql")
        '/etc/etl/sql/load.sql'
    """

    def replacer(match: re.Match[str]) -> str:
        var_name = match.group(1) or match.group(2)
        env_value = os.environ.get(var_name)
        if env_value is None:
            if strict:
                raise KeyError(f"Environment variable not set: {var_name}")
            return str(match.group(0))
        return env_value

    return ENV_VAR_PATTERN.sub(replacer, value)
