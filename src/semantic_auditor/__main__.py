import sys

from semantic_auditor.app import main

sys.exit(main())
