"""Web-framework flavors and the interactive flavor selector."""

from .models import BuiltinFlavor, CustomFlavor, Flavor, flavor_label, parse_flavor
from .selector import FlavorSelector

__all__ = [
    "BuiltinFlavor",
    "CustomFlavor",
    "Flavor",
    "FlavorSelector",
    "flavor_label",
    "parse_flavor",
]
