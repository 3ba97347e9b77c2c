from nearest_aircraft.main import main

raise SystemExit(main())
