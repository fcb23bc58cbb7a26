"""Allow ``python -m irsource``."""

from irsource.cli.main import main

main()
