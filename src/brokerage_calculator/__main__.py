import sys

from brokerage_calculator.main import main

sys.exit(main())
