"""Allow running the front end with ``python -m notmuch_cli``."""

import sys

from .main import main

sys.exit(main())
