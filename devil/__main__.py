import sys

from devil.cli import main

sys.exit(main())
