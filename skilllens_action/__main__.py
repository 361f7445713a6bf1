import sys

from skilllens_action.main import main

sys.exit(main())
