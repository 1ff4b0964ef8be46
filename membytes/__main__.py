"""Run the ByteView walkthrough: ``python -m membytes``."""

from .walkthrough import main

raise SystemExit(main())
