"""Allow running mimels with ``python -m mimels``."""

from mimels.cli.main import main

main()
