from loxpy.cli import main

raise SystemExit(main())
