"""
Reboot Engine Driver
====================
Applies toggle steps to the region model and reports the resulting volume.

Note: This module should be pure Python and should NOT parse text.
"""
