"""Command-line tools for the ERN generator.

- ``python -m ddex_ern.cli.generate`` — turn a release JSON payload into
  an ERN 3.8.2 document on stdout or in a file.
"""
