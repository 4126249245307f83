import sys

from homebruh.cli import main

sys.exit(main())
