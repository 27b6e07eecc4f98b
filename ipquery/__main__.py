"""Allow ``python -m ipquery``."""

import sys

from .cli import main

sys.exit(main())
