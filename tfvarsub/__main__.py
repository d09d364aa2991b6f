"""Allow ``python -m tfvarsub``."""

import sys

from tfvarsub.cli.main import main


sys.exit(main())
