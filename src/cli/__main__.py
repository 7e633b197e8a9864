"""Allow `python -m src.cli`."""

from . import main

main()
