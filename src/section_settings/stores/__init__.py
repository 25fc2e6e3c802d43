"""Section store implementations."""

from .base import InMemorySectionStore, SectionStore
from .xml_store import XmlSectionStore
from .yaml_store import YamlSectionStore


__all__ = [
    "SectionStore",
    "InMemorySectionStore",
    "YamlSectionStore",
    "XmlSectionStore",
]
