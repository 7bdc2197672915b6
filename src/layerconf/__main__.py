from layerconf.cli import main

raise SystemExit(main())
