"""API 스키마 공통 베이스 모델."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """파이썬에서는 snake_case, JSON에서는 camelCase 필드명을 사용하는 모델."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
