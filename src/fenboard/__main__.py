from fenboard.app import main

raise SystemExit(main())
