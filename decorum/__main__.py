"""Allow ``python -m decorum``."""
from decorum.cli.main import main

main()
