# =============================================================================
# core/models/base.py - Shared Model Configuration
# =============================================================================
# The consuming UI speaks camelCase (signalTone, coverageScore, ...) while
# the record store and Python code use snake_case. ApiModel bridges both:
# fields are declared in snake_case, serialized with camelCase aliases, and
# accepted in either form on input.
# =============================================================================

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base class for every model that crosses the HTTP boundary."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
