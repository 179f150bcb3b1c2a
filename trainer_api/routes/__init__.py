# Routes package init
"""
Trainer API — API Routes Package
==================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - trainers.py: GET/POST /trainer, GET/DELETE /trainer/{id}
    - pokemon.py:  GET /pokemon, GET /pokemon-abilities/{id}
    - health.py:   GET /health

Routes stay thin: extract path/body input, call the service, return through
the envelope. Business logic lives in services.
"""

# Path ids are signed 32-bit integers
INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1
