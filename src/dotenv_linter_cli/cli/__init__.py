"""CLI layer — argument parsing, routing, output policy and error boundary.

This package is the outermost layer of the application.  It may import
from ``core``, ``infra``, and ``settings``, but no other layer may import
from ``cli``.
"""
