"""swftrawl — list classes, fonts and symbols declared in SWF files.

Reads many SWF files through a pluggable decoder and reports the
declared names merged, per file, or filtered against other files.
"""

from swftrawl.version import __version__

__all__: list[str] = ["__version__"]
