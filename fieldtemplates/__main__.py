from fieldtemplates.cli.main import main

raise SystemExit(main())
