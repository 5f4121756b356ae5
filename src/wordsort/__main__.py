import sys

from wordsort.cli import main

sys.exit(main())
