"""
Generic decoding of raw response bodies into typed models.
"""

from typing import TypeVar

from pydantic import BaseModel, ValidationError

from ..shared.errors import NetworkError

ModelT = TypeVar("ModelT", bound=BaseModel)


def decode_response(model_type: type[ModelT], data: bytes | str) -> ModelT:
    """
    Decode a JSON payload into ``model_type``.

    Raises:
        NetworkError: decoding_error wrapping the parser or validation failure
    """
    try:
        return model_type.model_validate_json(data)
    except (ValidationError, ValueError) as e:
        raise NetworkError.decoding_error(e) from e
