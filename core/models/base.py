# =============================================================================
# core/models/base.py - Shared Model Configuration
# =============================================================================
# Python attributes are snake_case; JSON keys are camelCase (birthDate,
# personsCount, ...) through pydantic aliases.
# =============================================================================

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase JSON keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
