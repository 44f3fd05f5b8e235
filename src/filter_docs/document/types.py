"""Type descriptions for documented data shapes.

A TypeDescription is a small tagged tree: arrays, objects and primitive
leaves. Only primitive leaves carry a description and a required flag.
"""

import logging
from enum import Enum
from typing import Annotated, Callable, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class PrimitiveKind(str, Enum):
    BOOLEAN = "boolean"
    FLOAT = "float"
    INTEGER = "integer"
    STRING = "string"


class ArrayType(BaseModel):
    """A homogeneous list of `element`."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["array"] = "array"
    element: "TypeDescription"


class ObjectType(BaseModel):
    """A mapping of named properties."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["object"] = "object"
    properties: dict[str, "TypeDescription"] = {}


class PrimitiveType(BaseModel):
    """A scalar leaf (boolean / float / integer / string)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["primitive"] = "primitive"
    primitive: PrimitiveKind
    description: str | None = None
    required: bool = True

    def described(self, description: str) -> "PrimitiveType":
        return self.model_copy(update={"description": description})

    def optional(self) -> "PrimitiveType":
        return self.model_copy(update={"required": False})


TypeDescription = Annotated[
    Union[ArrayType, ObjectType, PrimitiveType],
    Field(discriminator="kind"),
]

ArrayType.model_rebuild()
ObjectType.model_rebuild()


def boolean() -> PrimitiveType:
    return PrimitiveType(primitive=PrimitiveKind.BOOLEAN)


def float_() -> PrimitiveType:
    return PrimitiveType(primitive=PrimitiveKind.FLOAT)


def integer() -> PrimitiveType:
    return PrimitiveType(primitive=PrimitiveKind.INTEGER)


def string() -> PrimitiveType:
    return PrimitiveType(primitive=PrimitiveKind.STRING)


def object_(properties: dict[str, TypeDescription] | None = None) -> ObjectType:
    return ObjectType(properties=properties or {})


def array(element: TypeDescription) -> ArrayType:
    return ArrayType(element=element)


# Exact type lookup, so bool never falls through to int.
PYTHON_TYPES: dict[type, Callable[[], PrimitiveType]] = {
    bool: boolean,
    int: integer,
    float: float_,
    str: string,
}


def type_for(python_type: type) -> TypeDescription:
    """Return the default TypeDescription for a Python type.

    Unknown types are documented as an empty object.
    """
    factory = PYTHON_TYPES.get(python_type)
    if factory is None:
        logger.debug("No primitive mapping for %r, documenting it as an object", python_type)
        return object_()
    return factory()
