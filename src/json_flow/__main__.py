"""Allow ``python -m json_flow``."""

import sys

from json_flow.cli import main

sys.exit(main())
