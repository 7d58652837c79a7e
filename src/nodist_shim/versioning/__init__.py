"""Installed-version catalog and spec matching."""
