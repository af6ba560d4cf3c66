import sys

from solana_holdings.cli import main

sys.exit(main())
