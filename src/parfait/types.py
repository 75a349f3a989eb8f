from __future__ import annotations

from collections.abc import Hashable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Union

from pydantic import BaseModel, Field, StrictStr, field_validator
from pydantic import ValidationError as PydanticValidationError

from .errors import MissingArgumentError, TypeMismatchError, ValidationError

if TYPE_CHECKING:  # pragma: no cover
    from .core.application import Application


class ArtifactOptions(BaseModel):
    """Options shared by pages, regions, controls and applications."""

    name: StrictStr = Field(..., min_length=1)
    aliases: tuple[StrictStr, ...] = ()

    model_config = {"extra": "forbid", "frozen": True}

    @field_validator("aliases", mode="before")
    @classmethod
    def _coerce_aliases(cls, value: Any) -> Any:
        if value is None:
            return ()
        if not isinstance(value, (list, tuple)):
            raise ValueError("aliases must be a list of strings")
        return value


class ControlOptions(ArtifactOptions):
    text: StrictStr | None = None


def _describe(exc: PydanticValidationError) -> str:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "options"
        problems.append(f"{location}: {error['msg']}")
    return "; ".join(problems)


def parse_options(owner: str, model: type[ArtifactOptions] = ArtifactOptions, **values: Any) -> ArtifactOptions:
    """Validate constructor options, raising ``ValidationError`` naming ``owner``."""

    try:
        return model.model_validate(values)
    except PydanticValidationError as exc:
        raise ValidationError(f"{owner} options are invalid: {_describe(exc)}") from exc


@dataclass(frozen=True, slots=True)
class ByKey:
    """Region selector holding only a name or alias."""

    name: Hashable

    @property
    def filter_value(self) -> None:
        return None


@dataclass(frozen=True, slots=True)
class ByKeyAndFilter:
    """Region selector holding a name or alias and the value handed to ``Region.filter``."""

    name: Hashable
    filter_value: Any


RegionSelector = Union[ByKey, ByKeyAndFilter]


def region_selector(value: Any) -> RegionSelector:
    """Normalise ``"List"`` or ``{"List": "abc"}`` into a ``RegionSelector``."""

    if isinstance(value, (ByKey, ByKeyAndFilter)):
        return value
    if value is None:
        raise MissingArgumentError("Region name must be specified when requesting a Region")
    if isinstance(value, Mapping):
        if len(value) != 1:
            raise TypeMismatchError(
                f"Region selector mapping must hold exactly one entry, got {len(value)}"
            )
        ((name, filter_value),) = value.items()
        return ByKeyAndFilter(name=name, filter_value=filter_value)
    if not isinstance(value, Hashable):
        raise TypeMismatchError(f"Region selector must be a name or a single-entry mapping, got {type(value).__name__}")
    return ByKey(name=value)


@dataclass(frozen=True, slots=True)
class ByName:
    """Application target given by name; found or created through a registry."""

    name: str


@dataclass(frozen=True, slots=True)
class ByInstance:
    application: "Application"


ApplicationTarget = Union[ByName, ByInstance]
