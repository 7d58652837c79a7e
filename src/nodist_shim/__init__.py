"""nodist-shim - pick the project's Node.js version and run it in place."""

__version__ = "0.9.0"
