"""Template variable substitution for Stats API endpoint paths."""

import os
import re

TEMPLATE_PATTERN = re.compile(r"\$\{([^}]+)\}")


class TemplateResolver:
    """Resolve ``${VAR}`` placeholders in endpoint paths."""

    def __init__(self, **custom_vars):
        """Initialize template resolver with optional custom variables.

        Args:
            **custom_vars: Custom variables to make available (e.g., GAME_PK=744834)
        """
        self.custom_vars = custom_vars

    def resolve(self, text: str) -> str:
        """Resolve template variables in a string.

        Args:
            text: String with ${VAR} placeholders

        Returns:
            String with variables substituted
        """
        return TEMPLATE_PATTERN.sub(
            lambda match: self._get_variable_value(match.group(1).strip()), text
        )

    def _get_variable_value(self, var_name: str) -> str:
        """Get value for a variable name.

        Supports:
        - ${ENV:VAR_NAME} - Environment variable
        - ${GAME_PK} - Custom variable (if provided)

        Raises:
            ValueError: If the variable is unknown or the env var is unset
        """
        if var_name.startswith("ENV:"):
            env_var = var_name.split(":", 1)[1]
            value = os.getenv(env_var)
            if value is None:
                raise ValueError(f"Environment variable not found: {env_var}")
            return value

        if var_name in self.custom_vars:
            return str(self.custom_vars[var_name])

        raise ValueError(f"Unknown template variable: {var_name}")


def resolve_endpoint(template: str, **custom_vars) -> str:
    """Resolve an endpoint path template.

    Example:
        >>> resolve_endpoint("v1.1/game/${GAME_PK}/feed/live", GAME_PK=744834)
        'v1.1/game/744834/feed/live'
    """
    return TemplateResolver(**custom_vars).resolve(template)
