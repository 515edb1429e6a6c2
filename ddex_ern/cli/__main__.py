"""Allow ``python -m ddex_ern.cli`` execution."""

from ddex_ern.cli.generate import main

main()
