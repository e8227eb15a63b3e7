from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """API 경계 공통 스키마 (JSON은 camelCase, 내부는 snake_case)"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
