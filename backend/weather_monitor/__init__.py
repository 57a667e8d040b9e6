"""
Weather Monitor Backend
=======================

HTTP service for IoT weather devices: enrollment, enable/disable,
temperature submission and daily aggregation.

HOW IT'S ORGANIZED:
------------------
- models/    = Data structures (what does a reading look like?)
- services/  = Storage engine and the background summary reporter
- routers/   = API endpoints (the doors into our app)
- utils/     = Logging setup
- config.py  = Settings loaded from the environment
- main.py    = Puts it all together and starts the server
"""

__version__ = "1.0.0"
