"""XML section store for web.config style documents.

Each section is an element named after the section, holding ``field``
children:

    <configuration>
      <logSection>
        <field name="LogLevel" value="Info"/>
        <field name="Base.Buggy.LogLevel" value="Debug"/>
      </logSection>
    </configuration>
"""

from pathlib import Path

from lxml import etree

from ..events import SettingsEvents
from ..exceptions import PersistenceError, SectionNotFoundError
from .base import SectionStore


FIELD_TAG = "field"


class XmlSectionStore(SectionStore):
    """Section store backed by an XML file parsed with lxml."""

    def __init__(self, path: str | Path, read_only: bool = False, encoding: str = "utf-8"):
        super().__init__(read_only=read_only)
        self.path = Path(path)
        self.encoding = encoding

    def _parse(self) -> etree._ElementTree:
        parser = etree.XMLParser(remove_blank_text=True, encoding=self.encoding)
        return etree.parse(str(self.path), parser=parser)  # ruff: noqa: S320

    @staticmethod
    def _find_section(root: etree._Element, section_name: str) -> etree._Element | None:
        """Return the root or a direct child of the root named ``section_name``.

        Names are compared literally, so ``"*"`` or ``"field"`` never match
        arbitrary or nested elements.
        """
        if root.tag == section_name:
            return root
        for child in root.iterchildren():
            if child.tag == section_name:
                return child
        return None

    def _fail(self, message: str, section_name: str, key: str) -> PersistenceError:
        self.logger.error(
            SettingsEvents.WRITE_FAILED, path=str(self.path), section=section_name, error=message
        )
        return PersistenceError(message, section_name=section_name, key=key)

    def load_section(self, section_name: str) -> dict[str, str]:
        try:
            tree = self._parse()
        except (OSError, etree.XMLSyntaxError) as e:
            raise SectionNotFoundError(
                f"Cannot load section {section_name!r} from {self.path}: {e}",
                section_name=section_name,
            ) from e

        section = self._find_section(tree.getroot(), section_name)
        if section is None:
            raise SectionNotFoundError(
                f"Section {section_name!r} not found in {self.path}",
                section_name=section_name,
            )

        fields = {}
        for field in section.iterchildren(FIELD_TAG):
            name = field.get("name")
            if name is None:
                raise SectionNotFoundError(
                    f"Section {section_name!r} has a field without a name",
                    section_name=section_name,
                    context={"line": field.sourceline},
                )
            fields[name] = field.get("value", "")

        self.logger.debug(
            SettingsEvents.SECTION_LOADED, section=section_name, field_count=len(fields)
        )
        return fields

    def _write(self, section_name: str, key: str, value: str) -> None:
        if self.path.exists():
            try:
                tree = self._parse()
            except (OSError, etree.XMLSyntaxError) as e:
                raise self._fail(
                    f"Cannot read {self.path} before writing: {e}", section_name, key
                ) from e
            root = tree.getroot()
        else:
            root = etree.Element("configuration")
            tree = etree.ElementTree(root)

        # lxml rejects invalid tag names and non-XML characters with ValueError
        try:
            section = self._find_section(root, section_name)
            if section is None:
                section = etree.SubElement(root, section_name)

            # duplicates are all updated so the last-wins read stays consistent
            matches = [f for f in section.iterchildren(FIELD_TAG) if f.get("name") == key]
            for field in matches:
                field.set("value", value)
            if not matches:
                etree.SubElement(section, FIELD_TAG, name=key, value=value)
        except ValueError as e:
            raise self._fail(
                f"Cannot store {key!r} in section {section_name!r}: {e}", section_name, key
            ) from e

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tree.write(
                str(self.path), encoding=self.encoding, xml_declaration=True, pretty_print=True
            )
        except OSError as e:
            raise self._fail(f"Cannot write {self.path}: {e}", section_name, key) from e


__all__ = ["XmlSectionStore"]
