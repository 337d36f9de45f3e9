"""
Shared base model for API schemas.

Python code uses snake_case attribute names while the JSON API speaks
camelCase (``firstName``, ``isFavourite``, ``createdAt``).  Both forms
are accepted on input; responses are serialized by alias.
"""

from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel


# Stored documents carry ``ObjectId`` values; the API exposes them as strings.
IdStr = Annotated[str, BeforeValidator(str)]


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
