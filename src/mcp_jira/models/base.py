"""
Base models for the MCP Jira API models.

This module provides the base class used by the Jira models to convert
API responses into models and models back into plain dictionaries.
"""

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from ..exceptions import JiraDecodeError

# Type variable for the return type of from_api_response
T = TypeVar("T", bound="ApiModel")


class ApiModel(BaseModel):
    """
    Base model for all API models with common conversion methods.
    """

    @classmethod
    def from_api_response(cls: type[T], data: Any, **kwargs: Any) -> T:
        """
        Convert an API response to a model instance.

        Args:
            data: The decoded JSON body of the API response
            **kwargs: Additional context parameters

        Returns:
            An instance of the model

        Raises:
            JiraDecodeError: If the data does not have the expected shape
        """
        if not isinstance(data, dict):
            raise JiraDecodeError(
                f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}"
            )
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise JiraDecodeError(f"Unexpected {cls.__name__} payload: {e}") from e

    def to_simplified_dict(self) -> dict[str, Any]:
        """
        Convert the model to a dictionary keyed the way the API names things.

        Returns:
            A dictionary holding the keys that were present in the API response
        """
        return self.model_dump(by_alias=True, exclude_unset=True)
