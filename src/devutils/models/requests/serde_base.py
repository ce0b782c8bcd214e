from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class SerdeBase(BaseModel):
    """Wire models speak camelCase and accept snake_case too."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
