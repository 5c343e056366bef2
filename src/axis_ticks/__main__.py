from axis_ticks.cli import main

raise SystemExit(main())
