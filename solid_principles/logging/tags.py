# solid_principles/logging/tags.py
"""
Logging subsystem tags.

Changing a tag here updates it package-wide.
"""

REGISTRY = "[REGISTRY]"
RUNTIME = "[RUNTIME]"
CONFIG = "[CONFIG]"
DOCS = "[DOCS]"
CLI = "[CLI]"
