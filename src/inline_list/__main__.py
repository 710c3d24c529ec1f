"""Run the demo with ``python -m inline_list``."""

import sys

from inline_list.cli import main

sys.exit(main())
