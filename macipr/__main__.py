# macipr/__main__.py
import sys

from macipr.cli.main import main

sys.exit(main())
