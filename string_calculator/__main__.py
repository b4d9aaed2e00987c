from string_calculator.cli import main

raise SystemExit(main())
