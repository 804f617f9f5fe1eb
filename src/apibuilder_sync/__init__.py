"""apibuilder-sync — keep generated API Builder code in sync with disk.

Reads a project's `.apibuilder/config`, fetches generated files for every
configured (org, application, version, generator, target) tuple and rewrites
only the files whose generated content actually changed.
"""

__version__ = "0.3.0"
