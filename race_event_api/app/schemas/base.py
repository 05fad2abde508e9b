"""
Shared base model for API payloads.

The JSON contract uses camelCase keys (``fullName``, ``organizerId``)
while Python code uses snake_case attributes.  ``CamelModel`` accepts
either spelling on input and serialises with the camelCase aliases,
which FastAPI does by default for ``response_model`` types.
"""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }
