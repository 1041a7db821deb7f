"""Base use case and API model."""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


class ApiModel(BaseModel):
    """Request/response model exchanged with API clients.

    Serializes with camelCase keys and accepts either camelCase or
    snake_case on input.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
