# Routes package init
"""
BirdAPI: API Routes Package
============================

Route Inventory:
    - hello.py:   GET  /hello     (fixed greeting)
    - birds.py:   GET  /bird      (list stored birds as JSON)
                  POST /bird      (store a bird from a form, redirect to assets)
    - health.py:  GET  /health    (service and storage status)

Static files under ASSETS_URL are mounted in main.py, not routed here.

Design Principle:
    Routes are THIN. They read the request, call the injected store, and
    shape the response. Failures are raised as BirdAPIError subclasses and
    turned into responses by the global handlers.
"""
