"""
Goose Quotes Backend: API Routes Package
=========================================

Route Inventory:
    - home.py:    GET  /                         (greeting, optional honk)
                  GET  /api/goose-headers        (echo x-goose-id)
    - geese.py:   /api/geese...                  (CRUD, search, generation)
    - health.py:  GET  /health                   (service health check)

Routes stay thin: extract parameters, call a service, return a model.
"""
