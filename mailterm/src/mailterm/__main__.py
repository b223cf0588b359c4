"""Allow ``python -m mailterm``."""

from .cli import main

main()
