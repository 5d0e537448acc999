# Routes package init
"""
Item Service — API Routes Package
===================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - items.py:   POST   /items          (create)
                  GET    /items          (list, creation order)
                  GET    /items/{id}     (get)
                  PUT    /items/{id}     (rename)
                  DELETE /items/{id}     (delete)
    - health.py:  GET    /health         (service health check)

Routes are thin: extract data from the request, call the store, return the
result. Status codes for failures are decided by the exception handlers in
main.py, not here.
"""
