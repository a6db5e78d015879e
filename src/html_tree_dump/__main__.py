import sys

from html_tree_dump.cli.main import main

sys.exit(main())
