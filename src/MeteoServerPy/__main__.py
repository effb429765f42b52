import sys

from MeteoServerPy.servers.weather_server.weather_server import main

sys.exit(main())
