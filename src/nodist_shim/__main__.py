"""Allow ``python -m nodist_shim``."""

from .shim import main

main()
