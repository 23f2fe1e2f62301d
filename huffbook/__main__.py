import sys

from huffbook.cli import main

sys.exit(main())
