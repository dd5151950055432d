"""Version numbers of the library."""

VERSION_MAJOR = 1
VERSION_MINOR = 8
VERSION_PATCH = 0
VERSION = f"{VERSION_MAJOR}.{VERSION_MINOR}.{VERSION_PATCH}"