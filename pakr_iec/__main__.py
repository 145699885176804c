import sys

from pakr_iec.cli import main

sys.exit(main())
