"""Shared pydantic base for records exchanged over the wire.

Python attributes stay snake_case; JSON uses the camelCase field names
(``personalInfo``, ``overallScore``, ``questionIndex``...).
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
