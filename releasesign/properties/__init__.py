"""Java .properties support for releasesign."""

from .reader import parse_properties, read_properties

__all__ = ["parse_properties", "read_properties"]
