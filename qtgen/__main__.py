"""Allow ``python -m qtgen``."""

import sys

from .cli import main

sys.exit(main())
