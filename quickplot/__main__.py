from quickplot.cli import main

raise SystemExit(main())
