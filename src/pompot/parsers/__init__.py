"""
pompot.parsers - Descriptor parsers.
"""

from pompot.parsers.pom import (
    POM_FILE_NAME,
    PomDependency,
    PomModel,
    PomParent,
    PomParseError,
    PomParser,
    parse_pom_content,
)

__all__ = [
    "POM_FILE_NAME",
    "PomDependency",
    "PomModel",
    "PomParent",
    "PomParseError",
    "PomParser",
    "parse_pom_content",
]
