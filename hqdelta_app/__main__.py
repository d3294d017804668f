"""Allow ``python -m hqdelta_app``."""

import sys

from .cli import main

sys.exit(main())
