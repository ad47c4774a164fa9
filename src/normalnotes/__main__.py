import sys
from normalnotes.cli import main

sys.exit(main())
