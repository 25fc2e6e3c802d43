"""Example: Hierarchical settings lookup over a web.config style file"""
import sys
import tempfile
from enum import Enum
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
from section_settings import HierarchicalSettingsResolver, XmlSectionStore, get_setting


class LogLevel(Enum):
    Debug = 10
    Info = 20
    Warn = 30
    Error = 40


class Base: ...
class Buggy(Base): ...
class Stable(Base): ...


config = Path(tempfile.mkdtemp()) / "web.config"
config.write_text("""<configuration>
  <logSection>
    <field name="LogLevel" value="Info"/>
    <field name="Base.LogLevel" value="Warn"/>
    <field name="Base.Buggy.LogLevel" value="Debug"/>
    <field name="Base.Stable.LogLevel" value="Error"/>
    <field name="Timestamp" value="true"/>
  </logSection>
</configuration>
""")
store = XmlSectionStore(config)

print(f"Buggy:  {get_setting('logSection', 'LogLevel', LogLevel, type_chain=Buggy, store=store)}")
print(f"Stable: {get_setting('logSection', 'LogLevel', LogLevel, type_chain=Stable, store=store)}")
print(f"Other:  {get_setting('logSection', 'LogLevel', LogLevel, store=store)}")

resolver = HierarchicalSettingsResolver("logSection", Buggy, store)
print(f"Candidates: {resolver.candidate_keys('LogLevel')}")
print(f"Timestamp: {resolver.get_or_default('Timestamp', False)}")
