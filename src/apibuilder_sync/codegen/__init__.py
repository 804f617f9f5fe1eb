"""Generated code sync engine.

The sync runs in two phases:
1. Plan: fetch every configured generator/target, resolve where each file
   belongs on disk, and compare it with what is already there
2. Apply: write only the files whose generated content materially changed

Version-stamp lines (service version comments, user agent constants, ...)
are ignored when comparing, so a new generator release alone never
rewrites a file.
"""
