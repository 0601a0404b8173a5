import sys

from univ2_quote.cli.main import main

sys.exit(main())
