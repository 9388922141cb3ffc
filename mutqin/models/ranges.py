"""
Range descriptor models.

A test pool is described by a list of ranges, each one of:
- AyahRange: from one ayah key to another
- RukuRange: from one (juz, ruku) pair to another
- JuzRange: from one juz to another

Ranges only describe a selection. Resolving them against the verse index
lives in ``mutqin.core.ranges``.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from mutqin.exceptions import RangeDescriptorError


class AyahRef(BaseModel):
    """An ayah position given as surah and ayah number."""

    surah: int
    ayah: int

    model_config = {"frozen": True}

    @property
    def key(self) -> str:
        return f"{self.surah}:{self.ayah}"


class RukuRef(BaseModel):
    """A ruku position given as juz and ruku ordinal within the juz."""

    juz: int
    ruku: int

    model_config = {"frozen": True}


class AyahRange(BaseModel):
    """Every ayah from ``start`` to ``end`` inclusive."""

    type: Literal["ayah"] = "ayah"
    start: AyahRef
    end: AyahRef

    model_config = {"frozen": True}

    @property
    def label(self) -> str:
        return f"{self.start.key}-{self.end.key}"


class RukuRange(BaseModel):
    """Every ayah from the first of the start ruku to the last of the end ruku."""

    type: Literal["ruku"] = "ruku"
    start: RukuRef
    end: RukuRef

    model_config = {"frozen": True}

    @property
    def label(self) -> str:
        return f"J{self.start.juz}:R{self.start.ruku}-J{self.end.juz}:R{self.end.ruku}"


class JuzRange(BaseModel):
    """Every ayah in juz ``start`` through juz ``end``."""

    type: Literal["juz"] = "juz"
    start: int
    end: int

    model_config = {"frozen": True}

    @property
    def label(self) -> str:
        return f"Juz {self.start}-{self.end}"


RangeDescriptor = Annotated[
    Union[AyahRange, RukuRange, JuzRange],
    Field(discriminator="type"),
]

_range_adapter: TypeAdapter = TypeAdapter(RangeDescriptor)


def parse_range(payload: Any) -> AyahRange | RukuRange | JuzRange:
    """
    Validate a JSON-like payload into a range descriptor.

    Args:
        payload: Dict such as ``{"type": "juz", "start": 1, "end": 2}``

    Returns:
        The matching range descriptor

    Raises:
        RangeDescriptorError: If the payload is structurally malformed
    """
    try:
        return _range_adapter.validate_python(payload)
    except ValidationError as e:
        first = e.errors()[0]
        raise RangeDescriptorError(f"Invalid range: {first['msg']}", payload=payload)


def parse_ranges(payloads: list[Any]) -> list[AyahRange | RukuRange | JuzRange]:
    """Validate a list of range payloads, preserving order."""
    return [parse_range(p) for p in payloads]
