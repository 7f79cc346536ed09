import sys

from nmeadecode.cli import main

sys.exit(main())
