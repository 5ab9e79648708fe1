"""Build file loading for bundlepipe-cli.

Wraps BuildFile.from_yaml() so that every failure mode surfaces as a
CLIError with a user-friendly message and the right exit code.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import yaml
from pydantic import ValidationError as PydanticValidationError

from bundlepipe_cli.errors import (
    CLIError,
    handle_file_not_found,
    handle_validation_error,
    handle_yaml_error,
)

if TYPE_CHECKING:
    from bundlepipe_core.schemas import BuildFile


def load_build_file(file_path: str) -> BuildFile:
    """Load and validate a bundlepipe.yaml file.

    Args:
        file_path: Path to the build file.

    Returns:
        Validated BuildFile.

    Raises:
        CLIError: If the file is missing, unreadable, or invalid.
    """
    # Import here to avoid heavy imports at CLI startup
    from bundlepipe_core import BuildFile, ConfigurationError

    path = Path(file_path)
    if not path.exists():
        handle_file_not_found(file_path)

    try:
        return BuildFile.from_yaml(path)
    except yaml.YAMLError as e:
        handle_yaml_error(e, file_path)
    except PydanticValidationError as e:
        handle_validation_error(e, file_path)
    except ConfigurationError as e:
        raise CLIError(e.user_message) from None
