import sys
from river_crossing.cli import main

sys.exit(main())
