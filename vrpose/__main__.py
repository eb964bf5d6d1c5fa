from .current import main

raise SystemExit(main())
