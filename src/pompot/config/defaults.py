"""
pompot.config.defaults - Default configuration values.
"""

CONFIG_FILE_NAME = ".pompot.toml"

DEFAULT_CONFIG = {
    "scan": {
        "root": "",
        "descriptor_name": "pom.xml",
        "exclude_dirs": [],
    },
    "server": {
        "host": "127.0.0.1",
        "port": 9754,
    },
}
