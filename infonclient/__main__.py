import sys

from infonclient.cli import main

sys.exit(main())
