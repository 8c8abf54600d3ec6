"""Allow ``python -m pif2pass``."""

from pif2pass.cli.main import main

main()
