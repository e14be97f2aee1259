"""Allow running ini-gen as `python -m ini_gen`."""

from .cli import main

main()
