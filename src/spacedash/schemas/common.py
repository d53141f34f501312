# src/spacedash/schemas/common.py

"""Common Pydantic schemas used across multiple resources."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model that serializes field names as camelCase.

    Input accepts either the camelCase alias or the Python field name, so
    ``{"coinsCollected": 5}`` and ``{"coins_collected": 5}`` are equivalent.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
