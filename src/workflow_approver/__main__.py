"""Allow ``python -m workflow_approver`` to run a single approval pass."""

import sys

from .action import main

sys.exit(main())
