from activity_sessions.cli import main

raise SystemExit(main())
