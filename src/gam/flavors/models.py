"""Flavor models."""

from __future__ import annotations

from enum import Enum

from pydantic import Field, StrictStr
from pydantic.dataclasses import dataclass


class BuiltinFlavor(str, Enum):
    """Flavors gam ships configuration and templates for."""

    GIN = "gin"
    GRPC = "gRPC"
    HTTP = "basic http"


@dataclass(frozen=True)
class CustomFlavor:
    """A free-form flavor typed by the operator."""

    raw: StrictStr = Field(min_length=1)


type Flavor = BuiltinFlavor | CustomFlavor


def parse_flavor(raw: str) -> Flavor:
    for flavor in BuiltinFlavor:
        if raw == flavor.value:
            return flavor
    return CustomFlavor(raw=raw)


def flavor_label(flavor: Flavor) -> str:
    match flavor:
        case BuiltinFlavor():
            return flavor.value
        case CustomFlavor(raw=raw):
            return raw
