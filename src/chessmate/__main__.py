from chessmate.app import main

raise SystemExit(main())
