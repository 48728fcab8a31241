"""jpikit - Jenkins plugin packaging toolkit.

Validates compiled class directories before they are merged into a
plugin archive and holds the plugin's packaging settings.
"""

__version__ = "0.1.0"
