"""Project configuration (`.apibuilder/config`).

The file declares which generators to run for which applications and where
their output goes:

    settings:
      code.create.directories: true
    code:
      <org>:
        <application>:
          version: latest
          generators:
            <generator>: <target path or list of paths>

Target paths are relative to the project root.
"""

# Setting keys recognised under `settings:`
CREATE_DIRECTORIES = "code.create.directories"

KNOWN_SETTINGS = {CREATE_DIRECTORIES}

# Explicit per-target kinds; anything else is rejected by the validator
TARGET_KINDS = {"file", "directory"}
