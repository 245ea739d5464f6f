"""Shared base helpers for culvert sizing model dataclasses."""

from __future__ import annotations
from abc import abstractmethod
import math
from typing import Any, Mapping, Sequence, cast
from _collections_abc import Mapping as ABCMapping, Sequence as ABCSequence
from loguru import logger
from ..classes_references import InvalidInput


class Validatable:
    """
    A mixin class that provides a validation interface for sizing inputs.

    Classes that inherit from `Validatable` must implement the `validate` method.
    This mixin supplies the `assert_valid` helper, which invokes `validate` and
    raises `InvalidInput` if any problems are found.
    """

    def assert_valid(self, prefix: str = "") -> None:
        """
        Raise `InvalidInput` if the model is invalid.

        Args:
            prefix: An optional string to prepend to each validation error message.
        """
        errors: list[str] = self.validate(prefix=prefix)
        if errors:
            logger.debug("Validation failed for {model}: {errors}", model=self.__class__.__name__, errors=errors)
            raise InvalidInput(errors)
        logger.debug("Validation succeeded for {model}.", model=self.__class__.__name__)

    @abstractmethod
    def validate(self, prefix: str = "") -> list[str]:
        """
        Return a list of validation errors, or an empty list if the model is valid.

        Args:
            prefix: A string to prepend to each validation error message for context.
        """
        pass


def string_list() -> list[str]:
    """
    Return a new `list[str]`.

    Used as a `default_factory` in dataclasses to avoid mutable default arguments.
    """

    return []


def is_finite_number(value: Any) -> bool:
    """Return True for finite numbers."""

    return _is_number(value) and math.isfinite(value)


def is_positive_number(value: Any) -> bool:
    """Return True for finite numbers strictly greater than zero."""

    return _is_number(value) and math.isfinite(value) and value > 0


def is_non_negative_number(value: Any) -> bool:
    """Return True for finite numbers greater than or equal to zero."""

    return _is_number(value) and math.isfinite(value) and value >= 0


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def normalize_sequence(value: Any) -> list[Any]:
    """Return a list or fall back to an empty list for non-sequence values."""

    if isinstance(value, ABCSequence) and not isinstance(value, (str, bytes)):
        return list(cast(Sequence[Any], value))
    return []


def normalize_mapping(value: Any) -> Mapping[str, Any]:
    """Return a mapping or an empty dict if the value is not mapping-like."""

    if isinstance(value, ABCMapping):
        return cast(Mapping[str, Any], value)
    return {}
