"""Version information for zopfli-tool package"""

__version__ = "0.3.0"
__version_info__ = (0, 3, 0)
__author__ = "vistart"
__email__ = "i@vistart.me"
__license__ = "MIT"
__copyright__ = "Copyright 2025 vistart"

# Version details
VERSION_MAJOR = 0
VERSION_MINOR = 3
VERSION_PATCH = 0
VERSION_SUFFIX = ""  # For pre-release versions like "alpha", "beta", "rc1"

# Full version string
if VERSION_SUFFIX:
    VERSION_STRING = f"{VERSION_MAJOR}.{VERSION_MINOR}.{VERSION_PATCH}-{VERSION_SUFFIX}"
else:
    VERSION_STRING = f"{VERSION_MAJOR}.{VERSION_MINOR}.{VERSION_PATCH}"

# Ensure version consistency
assert __version__ == VERSION_STRING, "Version mismatch between __version__ and VERSION_STRING"

LONG_VERSION = (
    f"{__version__}\n"
    "\n"
    f"{__copyright__}\n"
    "\n"
    f"This program is distributed under the terms of the {__license__} License.\n"
    "\n"
    "This is free software: you are free to change and redistribute it. There is NO\n"
    "WARRANTY, to the extent permitted by law."
)
