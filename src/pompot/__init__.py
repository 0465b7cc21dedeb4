"""
pompot - Find values repeated across Maven pom.xml files

pompot scans a directory tree for pom.xml files, builds a small graph
for each project, and reports properties and dependency versions that
are declared identically in two or more of them.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pompot")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"  # Not installed
__license__ = "MIT"

from pompot.common_values import CommonValue, extract_common_values
from pompot.models import ParsedProject, ParsedProjectCollection
from pompot.repository import ParsedProjectRepository
from pompot.scanner import PomDirectoryScanner, ScanOutcome, ScanResult

__all__ = [
    "__version__",
    "CommonValue",
    "extract_common_values",
    "ParsedProject",
    "ParsedProjectCollection",
    "ParsedProjectRepository",
    "PomDirectoryScanner",
    "ScanOutcome",
    "ScanResult",
]
