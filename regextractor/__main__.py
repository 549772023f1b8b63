# regextractor/__main__.py
import sys

from regextractor.cli import main

sys.exit(main())
