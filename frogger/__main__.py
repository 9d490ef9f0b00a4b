import sys

from frogger.main import main

sys.exit(main())
