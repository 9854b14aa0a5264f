from dns_failover.cli import main

raise SystemExit(main())


# Copyright (c) Liam Suorsa
