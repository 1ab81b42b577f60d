"""CLI package.

The ``cli`` sub-package contains the Click application and all command
implementations.  It is the only place that prints or decides the
process exit status.
"""
from __future__ import annotations
